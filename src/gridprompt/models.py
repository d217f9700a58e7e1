"""Data models for gridprompt."""

from dataclasses import dataclass
from enum import Enum


class Direction(Enum):
    """Arrow key directions."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


class KeyKind(Enum):
    """Kinds of key events the navigation engine understands."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    DIGIT = "digit"
    SUBMIT = "submit"

    @property
    def direction(self) -> Direction | None:
        """Direction for arrow kinds, None otherwise."""
        try:
            return Direction(self.value)
        except ValueError:
            return None


class RenderMode(Enum):
    """Whether the prompt is still being edited or already answered."""

    ACTIVE = "active"
    ANSWERED = "answered"


@dataclass(frozen=True)
class Position:
    """Row/column coordinate in the grid."""

    row: int
    col: int


@dataclass(frozen=True)
class KeyEvent:
    """A classified key press."""

    kind: KeyKind
    shift: bool = False
    digit: int | None = None

    @classmethod
    def arrow(cls, direction: Direction, shift: bool = False) -> "KeyEvent":
        return cls(KeyKind(direction.value), shift=shift)

    @classmethod
    def number(cls, digit: int) -> "KeyEvent":
        return cls(KeyKind.DIGIT, digit=digit)

    @classmethod
    def submit(cls) -> "KeyEvent":
        return cls(KeyKind.SUBMIT)

    @property
    def direction(self) -> Direction | None:
        return self.kind.direction

    def unshifted(self) -> "KeyEvent":
        """Same key without the shift modifier."""
        return KeyEvent(self.kind, shift=False, digit=self.digit)


@dataclass
class SelectionState:
    """Mutable selection state, updated once per key event."""

    selected_index: int = 0
    last_key: KeyEvent | None = None

    @property
    def is_moving(self) -> bool:
        """True when the last event was a shift-modified arrow (a cell move)."""
        return (
            self.last_key is not None
            and self.last_key.shift
            and self.last_key.direction is not None
        )
