"""Per-client output channel backing one open stream."""

from __future__ import annotations

import asyncio
import threading
from collections.abc import AsyncIterator

_CLOSED = object()


class ChannelWriteError(Exception):
    """Channel rejected a frame."""


class ChannelClosedError(ChannelWriteError):
    """Write attempted after the channel was closed."""


class ChannelFullError(ChannelWriteError):
    """Buffered frame limit reached."""


class OutputChannel:
    """FIFO of encoded frames drained by one streaming response.

    Bound to the event loop it was created on. `write` and `close` may be
    called from that loop or from any other thread.
    """

    def __init__(self, max_buffered_frames: int | None = None) -> None:
        self._loop = asyncio.get_running_loop()
        self._queue: asyncio.Queue[object] = asyncio.Queue()
        self._max_buffered_frames = max_buffered_frames
        self._lock = threading.Lock()
        self._closed = False
        # accepted but not yet consumed, including off-loop writes still in flight
        self._pending = 0

    @property
    def closed(self) -> bool:
        return self._closed

    def write(self, frame: bytes) -> None:
        with self._lock:
            if self._closed:
                raise ChannelClosedError("channel is closed")
            if self._max_buffered_frames is not None and self._pending >= self._max_buffered_frames:
                raise ChannelFullError(f"channel holds {self._max_buffered_frames} undelivered frames")
            self._put(frame)
            self._pending += 1

    def close(self) -> bool:
        """Close the channel. Returns False if it was already closed."""
        with self._lock:
            if self._closed:
                return False
            self._closed = True
            try:
                self._put(_CLOSED)
            except ChannelClosedError:
                pass
            return True

    async def frames(self) -> AsyncIterator[bytes]:
        while True:
            item = await self._queue.get()
            if item is _CLOSED:
                return
            self._consumed()
            yield item

    def _consumed(self) -> None:
        with self._lock:
            self._pending -= 1

    def _put(self, item: object) -> None:
        try:
            running = asyncio.get_running_loop()
        except RuntimeError:
            running = None

        if running is self._loop:
            self._queue.put_nowait(item)
            return
        try:
            self._loop.call_soon_threadsafe(self._queue.put_nowait, item)
        except RuntimeError as exc:
            raise ChannelClosedError("owning event loop is closed") from exc
