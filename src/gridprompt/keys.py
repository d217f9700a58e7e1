"""Terminal key decoding on top of readchar."""

from __future__ import annotations

import logging
from collections.abc import Callable

import readchar

from gridprompt.models import Direction, KeyEvent

logger = logging.getLogger("gridprompt.keys")

# Shift+arrow escape sequences (xterm and rxvt styles)
SHIFT_UP = "\x1b[1;2A"
SHIFT_DOWN = "\x1b[1;2B"
SHIFT_RIGHT = "\x1b[1;2C"
SHIFT_LEFT = "\x1b[1;2D"
RXVT_SHIFT_UP = "\x1b[a"
RXVT_SHIFT_DOWN = "\x1b[b"
RXVT_SHIFT_RIGHT = "\x1b[c"
RXVT_SHIFT_LEFT = "\x1b[d"

ARROW_KEYS: dict[str, KeyEvent] = {
    readchar.key.UP: KeyEvent.arrow(Direction.UP),
    readchar.key.DOWN: KeyEvent.arrow(Direction.DOWN),
    readchar.key.LEFT: KeyEvent.arrow(Direction.LEFT),
    readchar.key.RIGHT: KeyEvent.arrow(Direction.RIGHT),
    SHIFT_UP: KeyEvent.arrow(Direction.UP, shift=True),
    SHIFT_DOWN: KeyEvent.arrow(Direction.DOWN, shift=True),
    SHIFT_LEFT: KeyEvent.arrow(Direction.LEFT, shift=True),
    SHIFT_RIGHT: KeyEvent.arrow(Direction.RIGHT, shift=True),
    RXVT_SHIFT_UP: KeyEvent.arrow(Direction.UP, shift=True),
    RXVT_SHIFT_DOWN: KeyEvent.arrow(Direction.DOWN, shift=True),
    RXVT_SHIFT_LEFT: KeyEvent.arrow(Direction.LEFT, shift=True),
    RXVT_SHIFT_RIGHT: KeyEvent.arrow(Direction.RIGHT, shift=True),
}

VIM_KEYS: dict[str, KeyEvent] = {
    "k": KeyEvent.arrow(Direction.UP),
    "j": KeyEvent.arrow(Direction.DOWN),
    "h": KeyEvent.arrow(Direction.LEFT),
    "l": KeyEvent.arrow(Direction.RIGHT),
    "K": KeyEvent.arrow(Direction.UP, shift=True),
    "J": KeyEvent.arrow(Direction.DOWN, shift=True),
    "H": KeyEvent.arrow(Direction.LEFT, shift=True),
    "L": KeyEvent.arrow(Direction.RIGHT, shift=True),
}

SUBMIT_KEYS = {readchar.key.ENTER, "\r", "\n"}


def decode_key(key: str, vim_keys: bool = True) -> KeyEvent | None:
    """Classify a raw key string. Returns None for keys the prompt ignores."""
    if key in ARROW_KEYS:
        return ARROW_KEYS[key]
    if key in SUBMIT_KEYS:
        return KeyEvent.submit()
    if len(key) == 1 and key.isdigit():
        return KeyEvent.number(int(key))
    if vim_keys and key in VIM_KEYS:
        return VIM_KEYS[key]
    return None


def _is_partial_csi(key: str) -> bool:
    # readkey stops modifier sequences like ESC [1;2A after "ESC [1;"
    return key.startswith("\x1b[") and len(key) > 2 and (key[-1] == ";" or key[-1].isdigit())


def read_key_event(
    readkey: Callable[[], str] = readchar.readkey,
    readchar_: Callable[[], str] = readchar.readchar,
    vim_keys: bool = True,
) -> KeyEvent | None:
    """Block for one key press and decode it.

    Raises:
        KeyboardInterrupt: On Ctrl+C (raised by readchar)
    """
    key = readkey()
    while _is_partial_csi(key):
        key += readchar_()
    event = decode_key(key, vim_keys=vim_keys)
    if event is None:
        logger.debug("Unrecognized key %r", key)
    return event
