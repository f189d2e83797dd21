"""Lifecycle of one long-lived SSE stream: handshake, keep-alive, teardown."""

from __future__ import annotations

import asyncio
import logging
import threading
from collections.abc import AsyncIterator, Awaitable, Callable
from enum import Enum

from taskpulse.events.schemas import ConnectedEvent
from taskpulse.realtime.channel import ChannelWriteError, OutputChannel
from taskpulse.realtime.framing import PING_FRAME, encode_event
from taskpulse.realtime.registry import ConnectionRegistry

logger = logging.getLogger(__name__)

DEFAULT_KEEPALIVE_INTERVAL_SECONDS = 30.0


class StreamState(str, Enum):
    OPENING = "opening"
    ACTIVE = "active"
    CLOSED = "closed"


class StreamSession:
    """One client stream.

    `close` is the single teardown path. It runs its effects exactly once no
    matter how many abort signals fire or which thread fires them.
    """

    def __init__(
        self,
        registry: ConnectionRegistry,
        keepalive_interval: float = DEFAULT_KEEPALIVE_INTERVAL_SECONDS,
        max_buffered_frames: int | None = None,
        retry_ms: int | None = None,
    ) -> None:
        if keepalive_interval <= 0:
            raise ValueError("keepalive_interval must be > 0")
        self.registry = registry
        self.keepalive_interval = keepalive_interval
        self.retry_ms = retry_ms
        self.channel = OutputChannel(max_buffered_frames=max_buffered_frames)
        self.state = StreamState.OPENING
        self._keepalive_task: asyncio.Task[None] | None = None
        self._watch_task: asyncio.Task[None] | None = None
        self._state_lock = threading.Lock()

    def open(self) -> None:
        with self._state_lock:
            if self.state is not StreamState.OPENING:
                return
            self.registry.register(self.channel)
            self.channel.write(encode_event(ConnectedEvent(), retry_ms=self.retry_ms))
            self._keepalive_task = asyncio.create_task(self._keepalive())
            self.state = StreamState.ACTIVE
        logger.info("Stream opened (%d connected)", len(self.registry))

    def close(self) -> bool:
        """Tear down the stream. Returns False if it was already closed."""
        with self._state_lock:
            if self.state is StreamState.CLOSED:
                return False
            self.state = StreamState.CLOSED
            keepalive_task, self._keepalive_task = self._keepalive_task, None
            watch_task, self._watch_task = self._watch_task, None

        for task in (keepalive_task, watch_task):
            if task is not None:
                _cancel(task)
        self.registry.unregister(self.channel)
        self.channel.close()
        logger.info("Stream closed (%d connected)", len(self.registry))
        return True

    def watch_disconnect(
        self,
        is_disconnected: Callable[[], Awaitable[bool]],
        poll_interval: float = 1.0,
    ) -> None:
        """Poll the transport's disconnect probe and close when it reports True."""

        async def _watch() -> None:
            while self.state is not StreamState.CLOSED:
                if await is_disconnected():
                    self.close()
                    return
                await asyncio.sleep(poll_interval)

        self._watch_task = asyncio.create_task(_watch())

    async def frames(self) -> AsyncIterator[bytes]:
        """Yield frames until closed. Cancelling the consumer closes the stream."""
        self.open()
        try:
            async for frame in self.channel.frames():
                yield frame
        finally:
            self.close()

    async def _keepalive(self) -> None:
        while True:
            await asyncio.sleep(self.keepalive_interval)
            try:
                self.channel.write(PING_FRAME)
            except ChannelWriteError as exc:
                # teardown stays with close(); only the timer stops here
                logger.debug("Keep-alive stopped: %s", exc)
                return


def _cancel(task: asyncio.Task[None]) -> None:
    if task.done():
        return
    try:
        running = asyncio.get_running_loop()
    except RuntimeError:
        running = None

    if running is task.get_loop():
        if task is not asyncio.current_task():
            task.cancel()
    elif not task.get_loop().is_closed():
        task.get_loop().call_soon_threadsafe(task.cancel)
