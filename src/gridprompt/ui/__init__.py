"""UI module."""

from .base import PromptHost
from .renderer import GridRenderer
from .rich_host import RichPromptHost, prompt_grid

__all__ = [
    "GridRenderer",
    "PromptHost",
    "RichPromptHost",
    "prompt_grid",
]
