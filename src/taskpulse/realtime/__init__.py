"""Real-time event distribution over server-sent events."""

from taskpulse.realtime.broadcaster import EventBroadcaster
from taskpulse.realtime.hub import broadcast_event, get_broadcaster, get_registry
from taskpulse.realtime.registry import ConnectionRegistry
from taskpulse.realtime.session import StreamSession, StreamState

__all__ = [
    "ConnectionRegistry",
    "EventBroadcaster",
    "StreamSession",
    "StreamState",
    "broadcast_event",
    "get_broadcaster",
    "get_registry",
]
