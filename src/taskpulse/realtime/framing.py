"""SSE wire framing."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from taskpulse.events.schemas import ConnectedEvent, Event

PING_FRAME = b": ping\n\n"


def encode_event(event: Event | ConnectedEvent | Mapping[str, Any], retry_ms: int | None = None) -> bytes:
    """Encode one event as a single `data:` frame, optionally led by a `retry:` hint.

    Mappings are validated into `Event` first. Unserializable payloads raise
    here, before any delivery is attempted.
    """
    if isinstance(event, Mapping):
        event = Event.model_validate(dict(event))
    lines = []
    if retry_ms is not None:
        if retry_ms < 0:
            raise ValueError("retry_ms must be >= 0")
        lines.append(f"retry: {retry_ms}")
    lines.append(f"data: {event.model_dump_json()}")
    lines.append("")
    return ("\n".join(lines) + "\n").encode("utf-8")
