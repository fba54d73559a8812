"""Rich-based grid renderer for original data squares."""

from rich.color import Color
from rich.console import Console
from rich.style import Style
from rich.text import Text

from odsview.exceptions import RenderError
from odsview.models.square import ODS, RGB
from cli.display.console import console as shared_console

# Two columns per share keeps cells roughly square in a terminal
CELL = "  "


class GridRenderer:
    """Render an ODS as a grid of colored cells followed by a legend.

    Each share becomes one two-column block painted with its namespace color.
    The legend lists every distinct identifier on its own color.
    """

    def __init__(self, console: Console | None = None):
        """Initialize the renderer.

        Args:
            console: Rich Console instance (uses shared console if not provided).
        """
        self.console = console or shared_console

    def draw(self, ods: ODS) -> None:
        """Render the square, buffered and flushed as one write.

        Args:
            ods: Original data square to render.

        Raises:
            RenderError: If the output stream cannot be written.
        """
        try:
            with self.console:
                legend = self._render_grid(ods)
                self._render_legend(legend)
        except OSError as e:
            raise RenderError(f"Failed to write square for height {ods.height}: {e}") from e

    # ─────────────────────────────────────────────────────────────────────────
    # Private helpers
    # ─────────────────────────────────────────────────────────────────────────

    def _render_grid(self, ods: ODS) -> dict[str, RGB]:
        """Print the header and grid rows, returning the collected legend."""
        legend: dict[str, RGB] = {}

        self.console.print()
        self.console.print(Text(f"Height: {ods.height}"))

        for row in ods.cells:
            line = Text()
            for cell in row:
                line.append(CELL, style=self._background(cell.rgb))
                legend[cell.id] = cell.rgb
            self.console.print(line, soft_wrap=True)

        return legend

    def _render_legend(self, legend: dict[str, RGB]) -> None:
        """Print one line per identifier on its color."""
        self.console.print()
        self.console.print(Text("Legend:"))
        for identifier, rgb in legend.items():
            self.console.print(
                Text(identifier, style=self._background(rgb)), soft_wrap=True
            )

    @staticmethod
    def _background(rgb: RGB) -> Style:
        return Style(bgcolor=Color.from_rgb(*rgb))
