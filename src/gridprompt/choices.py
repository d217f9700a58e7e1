"""Ordered choice cells with positional swap."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from typing import Any

from gridprompt.ui.formatting import label_markup, plain_text

logger = logging.getLogger("gridprompt.choices")


class MissingChoicesError(ValueError):
    """Raised when a prompt is built without any choices."""

    pass


class InvalidIndexError(IndexError):
    """Raised when a swap targets an index outside the sequence."""

    pass


class Separator:
    """Placeholder that occupies a grid slot but is not a real choice."""

    def __init__(self, line: str = ""):
        self.line = line

    def __repr__(self) -> str:
        return f"Separator({self.line!r})" if self.line else "Separator()"


@dataclass(frozen=True)
class Cell:
    """One grid slot: a choice or a separator."""

    key: str
    label: str
    value: Any
    short: str
    is_separator: bool = False

    @classmethod
    def from_choice(cls, choice: Any) -> Cell:
        """Normalize a choice input (str, (label, value), mapping, Separator)."""
        if isinstance(choice, Separator):
            return cls(key="", label="", value=choice, short="", is_separator=True)

        if isinstance(choice, Mapping):
            if "name" not in choice:
                raise ValueError(f"Choice mapping needs a 'name' key: {choice!r}")
            label = label_markup(str(choice["name"]))
            value = choice.get("value", plain_text(label))
            short = label_markup(str(choice.get("short", label)))
        elif isinstance(choice, tuple) and len(choice) == 2:
            label = label_markup(str(choice[0]))
            value = choice[1]
            short = label
        else:
            label = label_markup(str(choice))
            value = plain_text(label)
            short = label

        return cls(key=plain_text(label), label=label, value=value, short=short)


class ChoiceSequence:
    """Ordered cells plus a snapshot of their original keys."""

    def __init__(self, choices: Iterable[Any]):
        cells = [Cell.from_choice(choice) for choice in choices]
        if not cells:
            raise MissingChoicesError("You must provide a `choices` parameter")
        self._cells = cells
        self._origin_keys = tuple(cell.key for cell in cells)

    def __len__(self) -> int:
        return len(self._cells)

    def __iter__(self) -> Iterator[Cell]:
        return iter(self._cells)

    def __getitem__(self, index: int) -> Cell:
        return self._cells[index]

    def __repr__(self) -> str:
        return f"ChoiceSequence({[cell.key for cell in self._cells]!r})"

    @property
    def cells(self) -> list[Cell]:
        """Copy of the current cell order."""
        return list(self._cells)

    @property
    def real_length(self) -> int:
        """Number of cells that are not separators."""
        return sum(1 for cell in self._cells if not cell.is_separator)

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._cells):
            raise InvalidIndexError(
                f"Index {index} out of range for {len(self._cells)} choices"
            )

    def swap(self, a: int, b: int) -> None:
        """Exchange the cells at positions a and b.

        Raises:
            InvalidIndexError: If either index is outside [0, len)
        """
        self._check_index(a)
        self._check_index(b)
        self._cells[a], self._cells[b] = self._cells[b], self._cells[a]
        logger.debug("Swapped %d <-> %d", a, b)

    def origin_keys(self) -> list[str]:
        """Keys of the cells in their original order."""
        return list(self._origin_keys)

    def changed_indices(self) -> set[int]:
        """Positions whose current cell differs from the original one."""
        return {
            i
            for i, (cell, key) in enumerate(zip(self._cells, self._origin_keys))
            if cell.key != key
        }

    def as_answers(self) -> list[Any]:
        """Values in current order; separators pass through as markers."""
        return [cell.value for cell in self._cells]

    def index_of_value(self, value: Any) -> int | None:
        """First position holding a non-separator cell with this value."""
        for i, cell in enumerate(self._cells):
            if not cell.is_separator and cell.value == value:
                return i
        return None
