"""Navigation state machine: key events -> selection moves and cell swaps."""

from __future__ import annotations

import logging
from typing import Any

from gridprompt.choices import ChoiceSequence
from gridprompt.geometry import GridShape, step
from gridprompt.models import Direction, KeyEvent, KeyKind, SelectionState

logger = logging.getLogger("gridprompt.navigation")


def resolve_default(choices: ChoiceSequence, default: Any) -> int:
    """Resolve a question default to the initially selected index.

    An int in [0, len) is used as-is, a string selects the choice with
    that value. Anything else (including unmatched strings) selects 0.
    """
    if isinstance(default, int) and not isinstance(default, bool):
        if 0 <= default < len(choices):
            return default
        return 0
    if isinstance(default, str):
        index = choices.index_of_value(default)
        return index if index is not None else 0
    return 0


class NavigationEngine:
    """Owns the selection state and applies key events to a ChoiceSequence."""

    def __init__(
        self,
        choices: ChoiceSequence,
        cols: int | None = None,
        default: Any = None,
        swap_separators: bool = False,
    ):
        self.choices = choices
        self.shape = GridShape.for_length(len(choices), cols)
        self.state = SelectionState(selected_index=resolve_default(choices, default))
        self.swap_separators = swap_separators
        self.answered = False

    @property
    def selected_index(self) -> int:
        return self.state.selected_index

    def handle(self, event: KeyEvent | None) -> list[Any] | None:
        """Apply one key event.

        Returns:
            The answers when the event submits the prompt, otherwise None
        """
        if self.answered:
            logger.debug("Ignoring %r: prompt already answered", event)
            return None
        if event is None:
            logger.debug("Ignoring unrecognized key")
            return None

        if event.kind is KeyKind.SUBMIT:
            return self.submit()
        if event.kind is KeyKind.DIGIT:
            self.jump(event.digit)
            self.state.last_key = event
            return None

        direction = event.direction
        if direction is None:
            return None
        if event.shift:
            allowed = self.move(direction)
            self.state.last_key = event if allowed else event.unshifted()
        else:
            self.navigate(direction)
            self.state.last_key = event
        return None

    def navigate(self, direction: Direction) -> int:
        """Move the selection one step, wrapping within the row or column."""
        self.state.selected_index = step(self.state.selected_index, direction, self.shape)
        return self.state.selected_index

    def move(self, direction: Direction) -> bool:
        """Swap the selected cell one step in `direction`; selection follows.

        Separators are not swapped unless `swap_separators` is set; the
        selection still moves in that case.

        Returns:
            False if the separator policy refused the swap. A step that lands
            back on the selected cell swaps nothing but still counts as a move.
        """
        source = self.state.selected_index
        target = step(source, direction, self.shape)
        allowed = self._can_swap(source, target)
        if not allowed:
            logger.debug("Not swapping separator between %d and %d", source, target)
        elif target != source:
            self.choices.swap(source, target)
        self.state.selected_index = target
        return allowed

    def _can_swap(self, source: int, target: int) -> bool:
        if self.swap_separators:
            return True
        return not (self.choices[source].is_separator or self.choices[target].is_separator)

    def jump(self, number: int | None) -> None:
        """Select cell `number` (1-based). Out-of-range numbers are ignored."""
        if number is None or not 1 <= number <= len(self.choices):
            logger.debug("Ignoring jump to %r", number)
            return
        self.state.selected_index = number - 1

    def submit(self) -> list[Any]:
        """Enter the answered state and return the final answers."""
        self.answered = True
        return self.choices.as_answers()
