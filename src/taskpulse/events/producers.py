"""Notifications emitted by domain handlers after a change is persisted.

Documents are passed through as given. Delivery is best-effort and never
fails the caller's own write.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from taskpulse.events import schemas
from taskpulse.events.schemas import Event
from taskpulse.realtime.hub import broadcast_event


def _notify(event_type: str, data: Any) -> int:
    return broadcast_event(Event(type=event_type, data=data))


def task_created(task: Mapping[str, Any]) -> int:
    return _notify(schemas.TASK_CREATED, dict(task))


def task_updated(task: Mapping[str, Any]) -> int:
    return _notify(schemas.TASK_UPDATED, dict(task))


def task_deleted(task_id: str) -> int:
    return _notify(schemas.TASK_DELETED, {"id": task_id})


def project_created(project: Mapping[str, Any]) -> int:
    return _notify(schemas.PROJECT_CREATED, dict(project))


def project_updated(project: Mapping[str, Any]) -> int:
    return _notify(schemas.PROJECT_UPDATED, dict(project))


def project_deleted(project_id: str) -> int:
    return _notify(schemas.PROJECT_DELETED, {"id": project_id})


def time_entry_created(entry: Mapping[str, Any]) -> int:
    return _notify(schemas.TIME_ENTRY_CREATED, dict(entry))


def time_entry_updated(entry: Mapping[str, Any]) -> int:
    return _notify(schemas.TIME_ENTRY_UPDATED, dict(entry))


def time_entry_deleted(entry_id: str) -> int:
    return _notify(schemas.TIME_ENTRY_DELETED, {"id": entry_id})


def comment_created(task_id: str, comment: Mapping[str, Any]) -> int:
    return _notify(schemas.COMMENT_CREATED, {"taskId": task_id, "comment": dict(comment)})
