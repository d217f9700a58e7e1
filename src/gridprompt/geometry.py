"""Grid coordinate math: linear index <-> (row, col), wrapping steps."""

import math
from collections.abc import Callable
from dataclasses import dataclass

from gridprompt.models import Direction, Position


def default_cols(length: int) -> int:
    """Default column count for `length` cells: ceil(sqrt(length))."""
    if length < 1:
        raise ValueError(f"Grid needs at least one cell, got {length}")
    return math.ceil(math.sqrt(length))


@dataclass(frozen=True)
class GridShape:
    """Fixed grid dimensions. The last row may be partially filled."""

    cols: int
    rows: int
    length: int

    @classmethod
    def for_length(cls, length: int, cols: int | None = None) -> "GridShape":
        """Build the shape for `length` cells.

        Args:
            length: Number of cells (separators included)
            cols: Explicit column count; None or 0 means automatic

        Returns:
            GridShape with rows = ceil(length / cols)
        """
        if length < 1:
            raise ValueError(f"Grid needs at least one cell, got {length}")
        if not cols:
            cols = default_cols(length)
        if cols < 0:
            raise ValueError(f"Column count must be positive, got {cols}")
        return cls(cols=cols, rows=math.ceil(length / cols), length=length)


def to_position(index: int, cols: int) -> Position:
    """Convert a linear index to a grid position."""
    return Position(row=index // cols, col=index % cols)


def to_index(position: Position, cols: int, length: int) -> int:
    """Convert a grid position to a linear index, clamped to [0, length - 1].

    A position inside the short last row but past its end clamps to the
    last cell.
    """
    raw = position.row * cols + position.col
    return max(0, min(raw, length - 1))


def step_up(position: Position, rows: int, cols: int) -> Position:
    return Position(row=(position.row - 1) % rows, col=position.col)


def step_down(position: Position, rows: int, cols: int) -> Position:
    return Position(row=(position.row + 1) % rows, col=position.col)


def step_left(position: Position, rows: int, cols: int) -> Position:
    return Position(row=position.row, col=(position.col - 1) % cols)


def step_right(position: Position, rows: int, cols: int) -> Position:
    return Position(row=position.row, col=(position.col + 1) % cols)


STEPS: dict[Direction, Callable[[Position, int, int], Position]] = {
    Direction.UP: step_up,
    Direction.DOWN: step_down,
    Direction.LEFT: step_left,
    Direction.RIGHT: step_right,
}


def step(index: int, direction: Direction, shape: GridShape) -> int:
    """Index reached from `index` by one wrapping step in `direction`."""
    position = to_position(index, shape.cols)
    moved = STEPS[direction](position, shape.rows, shape.cols)
    return to_index(moved, shape.cols, shape.length)
