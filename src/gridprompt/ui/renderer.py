"""Text grid renderer with box-drawing borders."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.cells import cell_len

from gridprompt.models import RenderMode, SelectionState
from gridprompt.ui.formatting import (
    BOTTOM,
    H_LINE,
    MIDDLE,
    POINTER,
    SEPARATOR_SUMMARY,
    TOP,
    V_LINE,
    label_width,
    styled,
)

if TYPE_CHECKING:
    from gridprompt.choices import Cell, ChoiceSequence
    from gridprompt.geometry import GridShape

MIN_CELL_WIDTH = 10


class GridRenderer:
    """Renders a ChoiceSequence as a Rich-markup grid.

    Every cell is `content_width` wide plus a pointer gutter on the left and
    one pad column on the right. Layout is computed on unstyled label widths;
    styling is only applied to the finished cell text.
    """

    def __init__(
        self,
        min_cell_width: int = MIN_CELL_WIDTH,
        pointer: str = POINTER,
        selected_style: str = "cyan",
        moving_style: str = "yellow",
        changed_style: str = "green",
        answer_style: str = "cyan",
    ):
        self.min_cell_width = min_cell_width
        self.pointer = pointer
        self.gutter = max(1, cell_len(pointer))
        self.selected_style = selected_style
        self.moving_style = moving_style
        self.changed_style = changed_style
        self.answer_style = answer_style

    def content_width(self, choices: ChoiceSequence) -> int:
        """Widest unstyled label, but at least `min_cell_width`."""
        widest = max((label_width(cell.label) for cell in choices), default=0)
        return max(self.min_cell_width, widest)

    def render(
        self,
        choices: ChoiceSequence,
        shape: GridShape,
        state: SelectionState,
        mode: RenderMode = RenderMode.ACTIVE,
    ) -> str:
        """Render the full grid for the given state. Never mutates its inputs."""
        width = self.content_width(choices)
        segment = H_LINE * (width + self.gutter + 1)
        changed = choices.changed_indices() if mode is RenderMode.ANSWERED else set()

        def border(chars: tuple[str, str, str]) -> str:
            left, join, right = chars
            return left + join.join([segment] * shape.cols) + right

        lines = [border(TOP)]
        for row in range(shape.rows):
            if row > 0:
                lines.append(border(MIDDLE))
            cells = []
            for col in range(shape.cols):
                index = row * shape.cols + col
                if index >= len(choices):
                    cells.append(" " * (width + self.gutter + 1))
                    continue
                cells.append(
                    self._cell(choices[index], index, width, state, mode, index in changed)
                )
            lines.append(V_LINE + V_LINE.join(cells) + V_LINE)
        lines.append(border(BOTTOM))
        return "\n".join(lines).rstrip("\n")

    def _cell(
        self,
        cell: Cell,
        index: int,
        width: int,
        state: SelectionState,
        mode: RenderMode,
        changed: bool,
    ) -> str:
        label = "" if cell.is_separator else cell.label
        free = width - label_width(label)
        left = free // 2
        body = " " * left + label + " " * (free - left) + " "

        if mode is RenderMode.ACTIVE and index == state.selected_index:
            style = self.moving_style if state.is_moving else self.selected_style
            pointer = self.pointer + " " * (self.gutter - cell_len(self.pointer))
            return styled(pointer + body, style)
        gutter = " " * self.gutter
        if changed:
            return styled(gutter + body, self.changed_style)
        return gutter + body

    def render_summary(self, choices: ChoiceSequence) -> str:
        """Flat one-line answer: short names joined by commas."""
        names = [SEPARATOR_SUMMARY if cell.is_separator else cell.short for cell in choices]
        return styled(", ".join(names), self.answer_style)
