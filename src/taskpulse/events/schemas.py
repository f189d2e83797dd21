"""Event contracts pushed to connected stream clients."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_serializer

TASK_CREATED = "task.created"
TASK_UPDATED = "task.updated"
TASK_DELETED = "task.deleted"
PROJECT_CREATED = "project.created"
PROJECT_UPDATED = "project.updated"
PROJECT_DELETED = "project.deleted"
TIME_ENTRY_CREATED = "time_entry.created"
TIME_ENTRY_UPDATED = "time_entry.updated"
TIME_ENTRY_DELETED = "time_entry.deleted"
COMMENT_CREATED = "comment.created"


def utc_now() -> datetime:
    """UTC now helper for consistent timestamps."""
    return datetime.now(timezone.utc)


class Event(BaseModel):
    """Tagged payload broadcast to every connected client.

    Extra keys are kept and serialized after `type` and `data`.
    """

    model_config = ConfigDict(frozen=True, extra="allow")

    type: str
    data: Any = None


class ConnectedEvent(BaseModel):
    """Handshake sent only to a freshly opened stream."""

    model_config = ConfigDict(frozen=True)

    type: Literal["connected"] = "connected"
    timestamp: datetime = Field(default_factory=utc_now)

    @field_serializer("timestamp")
    def serialize_timestamp(self, value: datetime) -> str:
        return value.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")
