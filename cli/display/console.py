"""Shared Rich console instance for consistent terminal output."""

from rich.console import Console

# Shared console instance used by all display renderers.
# Cells carry exact namespace colors, so always emit 24-bit escapes.
console = Console(highlight=False, color_system="truecolor", force_terminal=True)
