"""Built-in demo choice sets."""

import string
from itertools import product

DEMO_LEGEND = '[yellow]yellow[/yellow] means that a cell is being "moved"'
DEMO_DONE = "[dim](green cells have been changed)[/dim]"


def letters() -> list[str]:
    return list(string.ascii_uppercase)


def numbers() -> list[str]:
    return [str(n) for n in range(1, 10)]


def words() -> list[str]:
    """Expansion of abc{f,o,o}{b,a,r}{b,a,z}def (27 words)."""
    return [f"abc{a}{b}{c}def" for a, b, c in product("foo", "bar", "baz")]


DEMOS: dict[str, tuple[str, list[str]]] = {
    "letters": ("Rearrange the letters of the alphabet", letters()),
    "numbers": ("Rearrange cells", numbers()),
    "words": ("Rearrange cells", words()),
}
