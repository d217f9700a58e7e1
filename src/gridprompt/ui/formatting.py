"""Shared formatting utilities for cell labels and decorations."""

from rich.cells import cell_len
from rich.errors import MarkupError
from rich.markup import escape
from rich.text import Text

# Decorations
POINTER = "❯"
SEPARATOR_SUMMARY = "<Separator>"
QUESTION_PREFIX = "[green]?[/green]"
USAGE_HINT = "[dim](Use arrow keys to move. Hold down Shift to move item.)[/dim]"

# Box drawing characters
H_LINE = "─"
V_LINE = "│"
TOP = ("┌", "┬", "┐")
MIDDLE = ("├", "┼", "┤")
BOTTOM = ("└", "┴", "┘")


def plain_text(label: str) -> str:
    """Strip Rich markup from a label.

    Args:
        label: Rich markup string

    Returns:
        The text as it appears on screen, without styling
    """
    return Text.from_markup(label).plain


def label_width(label: str) -> int:
    """Terminal cell width of a label, ignoring its styling."""
    return cell_len(plain_text(label))


def ansi_to_markup(text: str) -> str:
    """Convert ANSI-styled text to equivalent Rich markup."""
    if "\x1b[" not in text:
        return text
    return Text.from_ansi(text).markup


def label_markup(text: str) -> str:
    """Normalize a label to valid Rich markup.

    ANSI styling is converted; text that does not parse as markup (such as a
    stray closing tag) is escaped and shown literally.
    """
    text = ansi_to_markup(text)
    try:
        Text.from_markup(text)
    except MarkupError:
        return escape(text)
    return text


def styled(text: str, style: str | None) -> str:
    """Wrap text in a Rich markup style tag (no-op for empty style)."""
    if not style:
        return text
    return f"[{style}]{text}[/{style}]"
