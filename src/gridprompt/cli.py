"""CLI commands."""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Annotated, Any

import typer
from rich.console import Console
from rich.markup import escape

if TYPE_CHECKING:
    from gridprompt.config import Config

app = typer.Typer(
    name="gridprompt",
    help="Rearrange items in an interactive terminal grid.",
    no_args_is_help=True,
)
console = Console()


def _get_config() -> Config:
    """Lazy import and load config."""
    from gridprompt.config import Config

    return Config.load()


def _run_prompt(
    message: str,
    choices: list[Any],
    cols: int | None,
    default: int | str | None,
    summary: bool = False,
) -> list[Any]:
    """Run the prompt or exit with an error message."""
    from gridprompt.choices import MissingChoicesError
    from gridprompt.ui.rich_host import prompt_grid

    try:
        answers = prompt_grid(
            message,
            choices,
            cols=cols,
            default=default,
            console=console,
            config=_get_config(),
            summary=summary or None,
        )
    except MissingChoicesError:
        console.print("[red]Error:[/red] No items to arrange")
        raise typer.Exit(1)

    if answers is None:
        console.print("[dim]Cancelled[/dim]")
        raise typer.Exit(1)
    return answers


@app.callback()
def main(
    verbose: Annotated[bool, typer.Option("-v", "--verbose", help="Enable debug logging")] = False,
):
    """Rearrange items in an interactive terminal grid."""
    if verbose:
        from rich.logging import RichHandler

        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        )


@app.command()
def arrange(
    items: Annotated[list[str] | None, typer.Argument(help="Items to arrange")] = None,
    message: Annotated[str, typer.Option("-m", "--message", help="Question text")] = "Layout your grid.",
    cols: Annotated[int | None, typer.Option("-c", "--cols", help="Number of columns")] = None,
    default: Annotated[
        str | None, typer.Option("-d", "--default", help="Item to select initially")
    ] = None,
    index: Annotated[
        int | None, typer.Option("-i", "--index", help="0-based index to select initially")
    ] = None,
    json_: Annotated[bool, typer.Option("--json", help="Print the result as JSON")] = False,
    summary: Annotated[
        bool, typer.Option("--summary", help="Show a one-line summary when done")
    ] = False,
):
    """Arrange ITEMS in a grid and print them in their final order."""
    if cols is not None and cols < 1:
        console.print(f"[red]Error:[/red] Invalid column count '{cols}'")
        raise typer.Exit(1)

    choices = [{"name": escape(item), "value": item} for item in items or []]
    initial: int | str | None = index if index is not None else default
    answers = _run_prompt(message, choices, cols, initial, summary=summary)

    if json_:
        typer.echo(json.dumps(answers))
    else:
        for answer in answers:
            typer.echo(answer)


@app.command()
def demo(
    name: Annotated[str, typer.Argument(help="Demo set: letters, numbers or words")] = "numbers",
    cols: Annotated[int | None, typer.Option("-c", "--cols", help="Number of columns")] = None,
):
    """Try the grid with a built-in set of cells."""
    from gridprompt.demos import DEMO_DONE, DEMO_LEGEND, DEMOS

    if name not in DEMOS:
        valid = ", ".join(DEMOS)
        console.print(f"[red]Error:[/red] Unknown demo '{name}'. Use: {valid}")
        raise typer.Exit(1)

    message, choices = DEMOS[name]
    console.print()
    console.print(DEMO_LEGEND)
    console.print()
    answers = _run_prompt(message, choices, cols, None)
    console.print(DEMO_DONE)
    console.print(json.dumps(answers))


def _register_config_subapp() -> None:
    """Register the config subapp with the main app."""
    from gridprompt.cli_config import config_app

    app.add_typer(config_app, name="config")


_register_config_subapp()
