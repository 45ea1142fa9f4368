"""UI preference commands for guestbook."""

import typer
from rich.table import Table

from guestbook.config.ui_config import (
    DEFAULT_CONFIG,
    get_ui_config_path,
    load_ui_config,
    set_value,
)
from guestbook.exceptions import ConfigurationError
from guestbook.utils.output import console

app = typer.Typer(help="View and change UI preferences")


@app.command("show")
def show_config():
    """Show current preferences (defaults merged with ui_config.json)."""
    config = load_ui_config()

    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("Key", style="cyan")
    table.add_column("Value", justify="right")
    table.add_column("Default", justify="right", style="dim")
    for key, default in DEFAULT_CONFIG.items():
        table.add_row(key, str(config.get(key)), str(default))

    console.print(table)
    console.print(f"[dim]{get_ui_config_path()}[/dim]")


@app.command("set")
def set_config(
    key: str = typer.Argument(..., help="Preference key"),
    value: int = typer.Argument(..., help="New value"),
):
    """Set one preference."""
    try:
        set_value(key, value)
    except ConfigurationError as e:
        console.print(f"[red]Error: {e.message}[/red]")
        console.print(f"[dim]Known keys: {', '.join(DEFAULT_CONFIG)}[/dim]")
        raise typer.Exit(1) from e

    console.print(f"[green]Set {key} = {value}[/green]")
