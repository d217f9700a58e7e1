"""Rich + readchar host for running a grid prompt in a terminal."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING, Any

from rich.console import Console
from rich.live import Live
from rich.text import Text

if TYPE_CHECKING:
    from gridprompt.config import Config

# UI Constants
LIVE_REFRESH_RATE = 20


class RichPromptHost:
    """Draws frames with a Rich Live display.

    Use as a context manager so the live display (and hidden cursor) is
    restored even when the prompt is interrupted.
    """

    def __init__(self, console: Console | None = None, default: int | str | None = None):
        self.console = console or Console()
        self.default = default
        self.answers: list[Any] | None = None
        self._live: Live | None = None

    def __enter__(self) -> RichPromptHost:
        self._live = Live(
            Text(""),
            console=self.console,
            auto_refresh=False,
            refresh_per_second=LIVE_REFRESH_RATE,
        )
        self._live.start()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        if self._live is not None:
            self._live.stop()
            self._live = None

    def get_default(self) -> int | str | None:
        return self.default

    def on_frame(self, text: str) -> None:
        renderable = Text.from_markup(text)
        if self._live is None:
            self.console.print(renderable)
            return
        self._live.update(renderable, refresh=True)

    def on_complete(self, answers: list[Any]) -> None:
        self.answers = answers
        self.close()


def prompt_grid(
    message: str,
    choices: Iterable[Any],
    cols: int | None = None,
    default: int | str | None = None,
    console: Console | None = None,
    config: Config | None = None,
    summary: bool | None = None,
) -> list[Any] | None:
    """Run a grid prompt in the terminal.

    Returns:
        The rearranged answers, or None if cancelled with Ctrl+C.

    Raises:
        MissingChoicesError: If choices is empty.
    """
    from gridprompt.config import Config
    from gridprompt.keys import read_key_event
    from gridprompt.prompt import GridPrompt

    cfg = config or Config.load()
    host = RichPromptHost(console=console, default=default)
    prompt = GridPrompt(message, choices, host, cols=cols, config=cfg, summary=summary)
    vim_keys = bool(cfg.vim_keys)

    with host:
        try:
            return prompt.run(lambda: read_key_event(vim_keys=vim_keys))
        except KeyboardInterrupt:
            return None
