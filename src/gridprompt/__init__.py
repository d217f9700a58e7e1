"""gridprompt - rearrange choices in a terminal grid."""

from gridprompt.choices import (
    ChoiceSequence,
    InvalidIndexError,
    MissingChoicesError,
    Separator,
)
from gridprompt.navigation import NavigationEngine
from gridprompt.prompt import GridPrompt
from gridprompt.ui import GridRenderer, PromptHost, RichPromptHost, prompt_grid

__version__ = "0.1.0"

__all__ = [
    "ChoiceSequence",
    "GridPrompt",
    "GridRenderer",
    "InvalidIndexError",
    "MissingChoicesError",
    "NavigationEngine",
    "PromptHost",
    "RichPromptHost",
    "Separator",
    "prompt_grid",
]
