"""Taskpulse command line interface."""

from __future__ import annotations

from pathlib import Path

import typer

from taskpulse.config import load_settings

app = typer.Typer(help="Taskpulse real-time event service", no_args_is_help=True)


@app.callback()
def main() -> None:
    """Taskpulse real-time event service."""


@app.command("serve")
def serve(
    host: str | None = typer.Option(None, help="Bind host (defaults to server.host in config)"),
    port: int | None = typer.Option(None, help="Bind port (defaults to server.port in config)"),
    config: Path = typer.Option(Path("configs/default.yaml"), help="App config yaml"),
) -> None:
    """Start the event stream API server."""
    from taskpulse.api.app import serve as serve_app

    settings = load_settings(config)
    serve_app(
        host=host or settings.server.host,
        port=port or settings.server.port,
        config_path=config,
    )


if __name__ == "__main__":
    app()
