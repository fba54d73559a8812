"""Typer application and command routing."""

import typer

from cli.commands import view

app = typer.Typer(
    add_completion=False,
    help="Terminal viewer for the original data square of a block.",
)

# Single command: `odsview [HEIGHT]`
app.command()(view)
