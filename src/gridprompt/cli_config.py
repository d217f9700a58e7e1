"""Config CLI commands."""

from __future__ import annotations

from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table
from rich.text import Text

console = Console()

config_app = typer.Typer(
    name="config",
    help="Show or change gridprompt settings.",
    no_args_is_help=True,
)


@config_app.command()
def show():
    """Show the effective settings."""
    from gridprompt.config import Config, ConfigMeta

    cfg = Config.load()
    descriptions = {**ConfigMeta.TOGGLES, **ConfigMeta.SETTINGS}

    table = Table(title=f"Config ({cfg.config_dir})", show_lines=False)
    table.add_column("Key", no_wrap=True)
    table.add_column("Value")
    table.add_column("Description", style="dim")
    for key, value in cfg.as_dict().items():
        table.add_row(key, Text(repr(value)), descriptions.get(key, ""))

    console.print(table)


@config_app.command(name="set")
def set_(
    key: Annotated[str, typer.Argument(help="Setting name")],
    value: Annotated[str, typer.Argument(help="New value")],
):
    """Change a setting and save it."""
    from gridprompt.config import Config

    cfg = Config.load()
    try:
        cfg.set(key, value)
    except KeyError:
        valid = ", ".join(Config.DEFAULTS)
        console.print(f"[red]Error:[/red] Unknown setting '{key}'. Valid: {valid}")
        raise typer.Exit(1)
    except ValueError:
        console.print(f"[red]Error:[/red] Invalid value '{value}' for {key}")
        raise typer.Exit(1)

    console.print(f"[green]✓[/green] {key} = {getattr(cfg, key)!r}")
