"""CLI package for the ODS viewer."""

import logging
import sys
from pathlib import Path

from odsview.config import ViewerConfig

FILE_FORMAT = "%(asctime)s [%(mode)s] %(name)s %(levelname)s: %(message)s"
CONSOLE_FORMAT = "odsview: %(levelname)s: %(message)s"


class _ModeFilter(logging.Filter):
    """Tag every record with the viewer mode ("stream" or "show")."""

    def __init__(self, mode: str):
        super().__init__()
        self.mode = mode

    def filter(self, record: logging.LogRecord) -> bool:
        record.mode = self.mode
        return True


def log_file_path(config: ViewerConfig, mode: str) -> Path:
    """Return the log file for a mode, e.g. ``logs/odsview-stream.log``."""
    base = Path(config.log_filename)
    return config.log_dir / f"{base.stem}-{mode}{base.suffix or '.log'}"


def setup_logging(
    mode: str,
    verbose: bool = False,
    quiet: bool = False,
    config: ViewerConfig | None = None,
) -> Path:
    """Send full debug logs to a per-mode file and warnings to stderr.

    Stdout carries the rendered squares, so nothing is ever logged there.

    Args:
        mode: "stream" or "show", used in the file name and every file record
        verbose: If True, set console to INFO level
        quiet: If True, set console to ERROR level only
        config: Optional ViewerConfig for log directory/filename settings

    Returns:
        Path of the log file
    """
    if config is None:
        config = ViewerConfig.from_env()

    path = log_file_path(config, mode)
    path.parent.mkdir(parents=True, exist_ok=True)

    file_handler = logging.FileHandler(path)
    file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
    file_handler.addFilter(_ModeFilter(mode))
    file_handler.setLevel(logging.DEBUG)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    if quiet:
        console_handler.setLevel(logging.ERROR)
    elif verbose:
        console_handler.setLevel(logging.INFO)
    else:
        console_handler.setLevel(logging.WARNING)

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()
    root_logger.addHandler(file_handler)
    root_logger.addHandler(console_handler)

    # asyncio debug chatter from the poll loop is noise here
    logging.getLogger("asyncio").setLevel(logging.WARNING)

    logging.getLogger(__name__).debug(
        f"Logging {mode} mode to {path} (node {config.node_url})"
    )
    return path


def main() -> None:
    """Main entry point for the CLI."""
    from cli.parser import app

    app()


__all__ = ["log_file_path", "main", "setup_logging"]
