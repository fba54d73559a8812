"""CLI utilities for process signal wiring."""

import asyncio
import logging
import signal

logger = logging.getLogger(__name__)

STOP_SIGNALS = (signal.SIGINT, signal.SIGTERM)


def install_stop_handlers(loop: asyncio.AbstractEventLoop, stop: asyncio.Event) -> None:
    """
    Set ``stop`` when the process receives an interrupt or termination signal.

    Args:
        loop: Running event loop to attach the handlers to
        stop: Event the streaming loop waits on
    """
    for sig in STOP_SIGNALS:
        try:
            loop.add_signal_handler(sig, stop.set)
        except NotImplementedError:
            # Windows event loops: fall back to KeyboardInterrupt for SIGINT
            logger.debug(f"Signal handler for {sig.name} not supported on this platform")


def remove_stop_handlers(loop: asyncio.AbstractEventLoop) -> None:
    """Remove handlers installed by install_stop_handlers."""
    for sig in STOP_SIGNALS:
        try:
            loop.remove_signal_handler(sig)
        except NotImplementedError:
            pass
