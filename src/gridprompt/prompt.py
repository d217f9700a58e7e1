"""Grid prompt session: wires the engine and renderer to a host."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING, Any

from gridprompt.choices import ChoiceSequence
from gridprompt.models import KeyEvent, RenderMode
from gridprompt.navigation import NavigationEngine
from gridprompt.ui.formatting import QUESTION_PREFIX, USAGE_HINT
from gridprompt.ui.renderer import GridRenderer

if TYPE_CHECKING:
    from gridprompt.config import Config
    from gridprompt.ui.base import PromptHost

logger = logging.getLogger("gridprompt.prompt")


class GridPrompt:
    """One prompt session.

    Example:
        prompt = GridPrompt("Layout your grid.", ["a", "b", "c", "d"], host, cols=2)
        answers = prompt.run(read_key_event)
    """

    def __init__(
        self,
        message: str,
        choices: Iterable[Any],
        host: PromptHost,
        cols: int | None = None,
        default: Any = None,
        config: Config | None = None,
        summary: bool | None = None,
    ):
        """Initialize the prompt.

        Args:
            message: Question shown above the grid (Rich markup).
            choices: Choice inputs, see ChoiceSequence.
            host: Receives frames and the final answers.
            cols: Column count; falls back to config, then to a square-ish grid.
            default: Initially selected index or value; falls back to host.get_default().
            config: Settings; defaults to Config.load().
            summary: Show a one-line answer instead of the grid; falls back to config.

        Raises:
            MissingChoicesError: If choices is empty.
        """
        if config is None:
            from gridprompt.config import Config

            config = Config.load()

        self.message = message
        self.host = host
        self.summary = bool(config.summary) if summary is None else summary
        self.choices = ChoiceSequence(choices)
        if default is None:
            default = host.get_default()
        self.engine = NavigationEngine(
            self.choices,
            cols=cols or config.cols or None,
            default=default,
            swap_separators=bool(config.swap_separators),
        )
        self.renderer = GridRenderer(
            min_cell_width=config.min_cell_width,
            pointer=config.pointer,
            selected_style=config.selected_style,
            moving_style=config.moving_style,
            changed_style=config.changed_style,
            answer_style=config.answer_style,
        )
        self.answers: list[Any] | None = None

    @property
    def answered(self) -> bool:
        return self.engine.answered

    def frame(self) -> str:
        """Render the current screen as Rich markup."""
        question = f"{QUESTION_PREFIX} [bold]{self.message}[/bold] "
        if self.answered:
            if self.summary:
                return question + self.renderer.render_summary(self.choices)
            grid = self.renderer.render(
                self.choices, self.engine.shape, self.engine.state, RenderMode.ANSWERED
            )
            return question + "\n" + grid
        grid = self.renderer.render(self.choices, self.engine.shape, self.engine.state)
        return question + USAGE_HINT + "\n" + grid

    def handle(self, event: KeyEvent | None) -> None:
        """Process one key event and push the next frame to the host."""
        if self.answered:
            return
        answers = self.engine.handle(event)
        self.host.on_frame(self.frame())
        if answers is not None:
            self.answers = answers
            logger.debug("Answered with %d choices", len(answers))
            self.host.on_complete(answers)

    def run(self, read_key: Callable[[], KeyEvent | None]) -> list[Any]:
        """Render, then process key events until the prompt is answered."""
        self.host.on_frame(self.frame())
        while not self.answered:
            self.handle(read_key())
        return self.answers or []
