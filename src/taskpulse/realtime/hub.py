"""Process-wide connection registry and broadcaster."""

from __future__ import annotations

from collections.abc import Mapping
from functools import lru_cache
from typing import Any

from taskpulse.events.schemas import Event
from taskpulse.realtime.broadcaster import EventBroadcaster
from taskpulse.realtime.registry import ConnectionRegistry


@lru_cache(maxsize=None)
def get_broadcaster() -> EventBroadcaster:
    """Created on first use, lives for the process."""
    return EventBroadcaster(ConnectionRegistry())


def get_registry() -> ConnectionRegistry:
    return get_broadcaster().registry


def broadcast_event(event: Event | Mapping[str, Any]) -> int:
    """Fire-and-forget notification to every connected stream client."""
    return get_broadcaster().broadcast(event)
