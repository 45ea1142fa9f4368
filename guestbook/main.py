#!/usr/bin/env python3
"""
Main CLI entry point for guestbook
"""

import typer

from guestbook import __version__
from guestbook.commands import guests
from guestbook.commands.config import app as config_app
from guestbook.utils.logging_utils import setup_logging

app = typer.Typer(
    help="guestbook - restaurant guest book",
    no_args_is_help=True,
)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose output"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Suppress non-error output"),
):
    """
    guestbook - restaurant guest book

    [bold]Examples:[/bold]

    List guests by lifetime spend:
        [cyan]guestbook list --sort lifetimeSpend --desc[/cyan]

    Find a guest:
        [cyan]guestbook search chen[/cyan]

    Open the interactive browser:
        [cyan]guestbook browse[/cyan]
    """
    if verbose and quiet:
        typer.echo("Error: --verbose and --quiet are mutually exclusive", err=True)
        raise typer.Exit(1)

    setup_logging(verbose=verbose, quiet=quiet)


@app.command()
def version():
    """Show guestbook version"""
    typer.echo(f"guestbook version {__version__}")


app.command("list")(guests.list_guests)
app.command()(guests.search)
app.command()(guests.show)
app.command()(guests.top)
app.command()(guests.stats)
app.command()(guests.browse)
app.add_typer(config_app, name="config")


def run():
    """Entry point for the CLI"""
    app()


if __name__ == "__main__":
    run()
