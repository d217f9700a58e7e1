"""Tests for label formatting helpers."""

from gridprompt.ui.formatting import ansi_to_markup, label_markup, label_width, plain_text, styled


def test_plain_text_strips_markup():
    assert plain_text("[bold red]hot[/bold red]") == "hot"


def test_plain_text_keeps_non_tag_brackets():
    assert plain_text("[1]") == "[1]"


def test_label_width_ignores_styling():
    assert label_width("[green]abc[/green]") == 3


def test_label_width_counts_wide_characters():
    assert label_width("日本") == 4


def test_ansi_to_markup_passthrough():
    assert ansi_to_markup("plain") == "plain"


def test_ansi_to_markup_converts():
    markup = ansi_to_markup("\x1b[1mbold\x1b[0m")
    assert "\x1b" not in markup
    assert plain_text(markup) == "bold"


def test_styled():
    assert styled("x", "cyan") == "[cyan]x[/cyan]"
    assert styled("x", "") == "x"


def test_label_markup_keeps_valid_markup():
    assert label_markup("[bold]x[/bold]") == "[bold]x[/bold]"


def test_label_markup_escapes_invalid_markup():
    markup = label_markup("[/x]")
    assert plain_text(markup) == "[/x]"
