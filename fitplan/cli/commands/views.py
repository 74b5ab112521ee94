"""Static dashboard views and the HTTP server command."""

from __future__ import annotations

import sys
from typing import Any, Optional

import typer

from fitplan.cli.renderers import render_analysis, render_dashboard
from fitplan.cli.utils import apply_log_override
from fitplan.services.dashboard_data import dashboard_overview, progress_analysis

LOG_LEVEL_HELP = "Override logging level for this invocation."


def _cli() -> Any:
    return sys.modules["fitplan.cli"]


def dashboard(
    log_level: str | None = typer.Option(None, "--log-level", "-l", help=LOG_LEVEL_HELP),
) -> None:
    """Show the dashboard overview (placeholder data)."""

    apply_log_override(log_level)
    render_dashboard(dashboard_overview())


def analysis(
    log_level: str | None = typer.Option(None, "--log-level", "-l", help=LOG_LEVEL_HELP),
) -> None:
    """Show the progress analysis view (placeholder data)."""

    apply_log_override(log_level)
    render_analysis(progress_analysis())


def serve(
    host: Optional[str] = typer.Option(None, help="Bind address (default from settings.yaml)."),
    port: Optional[int] = typer.Option(None, help="Port (default from settings.yaml)."),
    log_level: str | None = typer.Option(None, "--log-level", "-l", help=LOG_LEVEL_HELP),
) -> None:
    """Run the HTTP API with uvicorn."""

    import uvicorn

    apply_log_override(log_level)
    api_config = _cli().get_runtime().config_service.api_config
    uvicorn.run(
        "fitplan.api.app:app",
        host=host or api_config.get("host", "127.0.0.1"),
        port=port or int(api_config.get("port", 8000)),
        log_config=None,
    )
