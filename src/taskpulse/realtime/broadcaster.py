"""Fan-out of one encoded event to every registered channel."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from taskpulse.events.schemas import Event
from taskpulse.realtime.framing import encode_event
from taskpulse.realtime.registry import ConnectionRegistry

logger = logging.getLogger(__name__)


class EventBroadcaster:
    """Best-effort delivery: failing channels are dropped, never retried."""

    def __init__(self, registry: ConnectionRegistry) -> None:
        self.registry = registry

    def broadcast(self, event: Event | Mapping[str, Any]) -> int:
        """Deliver `event` to all channels. Returns the successful delivery count."""
        frame = encode_event(event)

        delivered = 0
        for connection in self.registry.snapshot():
            try:
                connection.write(frame)
            except Exception as exc:
                self.registry.unregister(connection)
                logger.debug("Dropped stream connection after failed write: %s", exc)
                continue
            delivered += 1
        return delivered
