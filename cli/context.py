"""Shared CLI context with lazy-initialized dependencies."""

from pathlib import Path

from odsview.config import ViewerConfig
from odsview.node.client import CelestiaCliClient, NodeClient
from odsview.node.service import SquareService
from cli.display.grid_renderer import GridRenderer

# Picked up from the working directory when --config is not given
DEFAULT_CONFIG_FILE = Path("config.toml")


class CLIContext:
    """Shared context with lazy-initialized dependencies for CLI commands.

    Usage:
        ctx = CLIContext()
        ctx.service.show(42)
    """

    def __init__(
        self,
        verbose: bool = False,
        quiet: bool = False,
        config_path: Path | None = None,
    ):
        """Initialize CLI context.

        Args:
            verbose: If True, enable info logging on the console
            quiet: If True, suppress non-error output
            config_path: Optional TOML config file. Defaults to ./config.toml
                when it exists, otherwise the environment is used
        """
        self.verbose = verbose
        self.quiet = quiet
        self.config_path = config_path

        # Lazy-loaded dependencies
        self._config: ViewerConfig | None = None
        self._client: NodeClient | None = None
        self._renderer: GridRenderer | None = None
        self._service: SquareService | None = None

    @property
    def config(self) -> ViewerConfig:
        """Get configuration (lazy-loaded)."""
        if self._config is None:
            if self.config_path is not None:
                self._config = ViewerConfig.from_toml(self.config_path)
            elif DEFAULT_CONFIG_FILE.is_file():
                self._config = ViewerConfig.from_toml(DEFAULT_CONFIG_FILE)
            else:
                self._config = ViewerConfig.from_env()
        return self._config

    @property
    def client(self) -> NodeClient:
        """Get node client (lazy-loaded)."""
        if self._client is None:
            self._client = CelestiaCliClient(
                self.config.node_url,
                auth_token=self.config.auth_token,
                binary=self.config.celestia_bin,
            )
        return self._client

    @property
    def renderer(self) -> GridRenderer:
        """Get grid renderer (lazy-loaded)."""
        if self._renderer is None:
            self._renderer = GridRenderer()
        return self._renderer

    @property
    def service(self) -> SquareService:
        """Get square service (lazy-loaded)."""
        if self._service is None:
            self._service = SquareService(self.client, self.renderer)
        return self._service


# Global context instance (set by the view command)
_ctx: CLIContext | None = None


def get_context() -> CLIContext:
    """Get the current CLI context.

    Returns:
        The global CLI context instance

    Raises:
        RuntimeError: If context not initialized
    """
    if _ctx is None:
        raise RuntimeError("CLI context not initialized. This should not happen.")
    return _ctx


def set_context(ctx: CLIContext) -> None:
    """Set the global CLI context.

    Args:
        ctx: The CLI context instance to set
    """
    global _ctx
    _ctx = ctx
