"""Display module for rendering squares in the terminal.

This module provides:
- console: Shared Rich console instance
- GridRenderer: Rich-based ODS grid and legend display
"""

from cli.display.console import console
from cli.display.grid_renderer import GridRenderer

__all__ = [
    "console",
    "GridRenderer",
]
