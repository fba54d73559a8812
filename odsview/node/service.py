"""Fetch loop tying the node client, extractor and renderer together."""

import asyncio
import contextlib
import logging
from typing import AsyncIterator, Protocol

from odsview.exceptions import DecodeError, NodeError
from odsview.models.square import ODS
from odsview.node.client import NodeClient
from odsview.processing.extractor import build_ods

logger = logging.getLogger(__name__)


class SquareRenderer(Protocol):
    """Protocol for square renderers."""

    def draw(self, ods: ODS) -> None:
        """Render one original data square."""
        ...


class SquareService:
    """Fetch squares from a node and render them, one height at a time."""

    def __init__(self, client: NodeClient, renderer: SquareRenderer):
        self.client = client
        self.renderer = renderer

    def fetch_ods(self, height: int) -> ODS:
        """Fetch the extended square for ``height`` and extract its ODS."""
        eds = self.client.get_eds(height)
        return build_ods(eds, height)

    def show(self, height: int) -> ODS:
        """One-shot mode: fetch, extract and render a single height.

        Errors propagate to the caller.
        """
        ods = self.fetch_ods(height)
        self.renderer.draw(ods)
        return ods

    async def watch_heights(self, poll_interval: float) -> AsyncIterator[int]:
        """Yield new block heights in order as the node's head advances.

        The first successful poll yields the current head only. Later polls
        yield every height between the last yielded one and the new head, so
        no height is skipped. Poll failures are logged and retried.
        """
        last_height: int | None = None
        while True:
            try:
                head = await asyncio.to_thread(self.client.local_head)
            except NodeError as e:
                logger.warning(f"Header poll failed: {e}")
            else:
                if last_height is None:
                    last_height = head - 1
                while last_height < head:
                    last_height += 1
                    yield last_height
            await asyncio.sleep(poll_interval)

    async def stream(self, poll_interval: float) -> None:
        """Streaming mode: render every new height sequentially.

        Fetch and decode failures only skip the affected height. Rendering is
        synchronous, so a render that has started always completes.
        """
        async for height in self.watch_heights(poll_interval):
            try:
                ods = await asyncio.to_thread(self.fetch_ods, height)
            except NodeError as e:
                logger.error(f"Failed to fetch height {height}: {e}")
                continue
            except DecodeError as e:
                logger.error(f"Failed to decode height {height}: {e}")
                continue
            self.renderer.draw(ods)

    async def run_until(self, stop: asyncio.Event, poll_interval: float) -> None:
        """Run the streaming loop in a background task until ``stop`` is set.

        Raises:
            RenderError: If the streaming task fails to write output
        """
        stream_task = asyncio.create_task(self.stream(poll_interval))
        stop_task = asyncio.create_task(stop.wait())

        done, _ = await asyncio.wait(
            {stream_task, stop_task}, return_when=asyncio.FIRST_COMPLETED
        )

        if stream_task in done:
            stop_task.cancel()
            # Re-raise whatever ended the stream
            stream_task.result()
            return

        stream_task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await stream_task
