"""FastAPI routes for the event stream and producer hook."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Request
from fastapi.responses import StreamingResponse

from taskpulse.api.schemas import BroadcastRequest
from taskpulse.config import AppSettings
from taskpulse.events.schemas import Event
from taskpulse.realtime.broadcaster import EventBroadcaster
from taskpulse.realtime.session import StreamSession

router = APIRouter()

SSE_HEADERS = {"Cache-Control": "no-cache", "Connection": "keep-alive", "X-Accel-Buffering": "no"}


def _broadcaster(request: Request) -> EventBroadcaster:
    return request.app.state.broadcaster


def _settings(request: Request) -> AppSettings:
    return request.app.state.settings


async def stream_events(request: Request) -> StreamingResponse:
    settings = _settings(request).stream
    session = StreamSession(
        _broadcaster(request).registry,
        keepalive_interval=settings.keepalive_interval_seconds,
        max_buffered_frames=settings.max_buffered_frames,
        retry_ms=settings.retry_ms,
    )
    session.open()
    session.watch_disconnect(request.is_disconnected, poll_interval=settings.disconnect_poll_seconds)

    return StreamingResponse(session.frames(), media_type="text/event-stream", headers=SSE_HEADERS)


@router.post("/api/events")
def post_event(payload: BroadcastRequest, request: Request) -> dict[str, Any]:
    delivered = _broadcaster(request).broadcast(Event(type=payload.type, data=payload.data))
    return {"status": "broadcast", "delivered": delivered}


@router.get("/api/health")
def health(request: Request) -> dict[str, Any]:
    return {"status": "ok", "connections": len(_broadcaster(request).registry)}
