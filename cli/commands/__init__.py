"""CLI commands package."""

from cli.commands.view import show_command, stream_command, view

__all__ = [
    "show_command",
    "stream_command",
    "view",
]
