"""Host protocol for swappable prompt front-ends."""

from typing import Any, Protocol


class PromptHost(Protocol):
    """What a grid prompt needs from the program hosting it."""

    def get_default(self) -> int | str | None:
        """Question default: an index, a choice value, or None."""
        ...

    def on_frame(self, text: str) -> None:
        """Show a rendered frame (Rich markup), replacing the previous one."""
        ...

    def on_complete(self, answers: list[Any]) -> None:
        """Receive the final answers. Called exactly once."""
        ...
