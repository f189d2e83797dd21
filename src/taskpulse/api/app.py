"""FastAPI application factory and server entrypoint."""

from __future__ import annotations

from pathlib import Path

import uvicorn
from fastapi import FastAPI

from taskpulse.api.routes import router, stream_events
from taskpulse.config import AppSettings, configure_logging, load_settings
from taskpulse.realtime.broadcaster import EventBroadcaster
from taskpulse.realtime.hub import get_broadcaster


def create_app(
    config_path: str | Path | None = None,
    broadcaster: EventBroadcaster | None = None,
) -> FastAPI:
    """Create configured FastAPI app."""
    settings: AppSettings = load_settings(config_path)
    configure_logging(settings.logging)

    app = FastAPI(title="Taskpulse", version="0.1.0")
    app.state.settings = settings
    app.state.broadcaster = broadcaster or get_broadcaster()

    app.add_api_route(settings.stream.path, stream_events, methods=["GET"])
    app.include_router(router)
    return app


def serve(host: str, port: int, config_path: str | Path | None = None) -> None:
    """Run app with single worker (required for in-memory stream registry)."""
    app = create_app(config_path=config_path)
    uvicorn.run(app, host=host, port=port, workers=1)
