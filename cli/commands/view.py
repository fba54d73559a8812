"""Render the original data square of one block or of every new block."""

import asyncio
import logging
import traceback
from pathlib import Path

import typer
from typing_extensions import Annotated

from odsview.exceptions import ViewerError
from odsview.node.service import SquareService
from cli import setup_logging
from cli.context import CLIContext, get_context, set_context
from cli.utils import install_stop_handlers, remove_stop_handlers

logger = logging.getLogger(__name__)

MAX_HEIGHT = 2**64 - 1


async def _stream_until_interrupted(service: SquareService, poll_interval: float) -> None:
    """Stream squares until SIGINT/SIGTERM."""
    loop = asyncio.get_running_loop()
    stop = asyncio.Event()
    install_stop_handlers(loop, stop)
    try:
        await service.run_until(stop, poll_interval)
    finally:
        remove_stop_handlers(loop)

    if stop.is_set():
        typer.echo("received interrupt signal, exiting", err=True)


def stream_command() -> None:
    """Render every new block until interrupted."""
    ctx = get_context()
    setup_logging("stream", ctx.verbose, ctx.quiet, ctx.config)
    logger.info(f"Watching for new headers from {ctx.config.node_url}")
    try:
        asyncio.run(_stream_until_interrupted(ctx.service, ctx.config.poll_interval))
    except KeyboardInterrupt:
        typer.echo("received interrupt signal, exiting", err=True)


def show_command(height: int) -> None:
    """Render the square for a single block height."""
    ctx = get_context()
    setup_logging("show", ctx.verbose, ctx.quiet, ctx.config)
    logger.info(f"Fetching square for height {height} from {ctx.config.node_url}")
    ctx.service.show(height)


def view(
    height: Annotated[
        int | None,
        typer.Argument(
            min=0,
            max=MAX_HEIGHT,
            help="Block height to render. Omit to follow new blocks.",
            show_default=False,
        ),
    ] = None,
    config_path: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help=(
                "TOML config file with 'url' and 'auth_key' "
                "(default: ./config.toml if present, else environment)"
            ),
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show info messages"),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Only show errors"),
    ] = False,
) -> None:
    """Render the original data square as a colored grid, grouped by namespace.

    Examples:
        odsview            # Follow new blocks until Ctrl+C
        odsview 1024       # Render block 1024 and exit
    """
    ctx = CLIContext(verbose=verbose, quiet=quiet, config_path=config_path)
    set_context(ctx)

    try:
        if height is None:
            stream_command()
        else:
            show_command(height)
    except ViewerError as e:
        logger.error(f"{type(e).__name__}: {e}")
        raise typer.Exit(1)
    except Exception as e:
        logger.error(f"Unexpected error: {e}")
        traceback.print_exc()
        raise typer.Exit(1)
