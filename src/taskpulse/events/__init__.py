"""Event contracts and producer helpers."""

from taskpulse.events.schemas import (
    COMMENT_CREATED,
    PROJECT_CREATED,
    PROJECT_DELETED,
    PROJECT_UPDATED,
    TASK_CREATED,
    TASK_DELETED,
    TASK_UPDATED,
    TIME_ENTRY_CREATED,
    TIME_ENTRY_DELETED,
    TIME_ENTRY_UPDATED,
    ConnectedEvent,
    Event,
)

__all__ = [
    "COMMENT_CREATED",
    "PROJECT_CREATED",
    "PROJECT_DELETED",
    "PROJECT_UPDATED",
    "TASK_CREATED",
    "TASK_DELETED",
    "TASK_UPDATED",
    "TIME_ENTRY_CREATED",
    "TIME_ENTRY_DELETED",
    "TIME_ENTRY_UPDATED",
    "ConnectedEvent",
    "Event",
]
