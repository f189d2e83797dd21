from __future__ import annotations

from collections.abc import Callable

import pytest

from taskpulse.realtime.channel import OutputChannel


def _drain(channel: OutputChannel) -> list[bytes]:
    """Pop every frame already delivered to `channel` without awaiting."""
    frames = []
    while not channel._queue.empty():
        item = channel._queue.get_nowait()
        if isinstance(item, bytes):
            channel._consumed()
            frames.append(item)
    return frames


@pytest.fixture
def drain() -> Callable[[OutputChannel], list[bytes]]:
    return _drain
