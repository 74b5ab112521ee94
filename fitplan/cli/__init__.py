"""FitPlan CLI package."""

from __future__ import annotations

import logging

import typer

from fitplan.cli.commands.plan import export, generate, prompt, render
from fitplan.cli.commands.views import analysis, dashboard, serve
from fitplan.cli.io import console
from fitplan.cli.renderers import (
    render_analysis,
    render_dashboard,
    render_plan_groups,
    render_prompt,
    render_validation_errors,
)
from fitplan.cli.runtime import (
    get_orchestrator,
    get_runtime,
    initialize_runtime,
    set_runtime,
    set_runtime_level,
)
from fitplan.cli.state import FORM_STEPS, PlanSession

logger = logging.getLogger(__name__)

app = typer.Typer(
    add_completion=False, help="Generate personalised fitness and nutrition plans."
)

app.command()(generate)
app.command()(prompt)
app.command()(render)
app.command()(export)
app.command()(dashboard)
app.command()(analysis)
app.command()(serve)


def main() -> None:
    """CLI entry point."""

    app()


__all__: list[str] = [
    "FORM_STEPS",
    "PlanSession",
    "analysis",
    "app",
    "console",
    "dashboard",
    "export",
    "generate",
    "get_orchestrator",
    "get_runtime",
    "initialize_runtime",
    "logger",
    "main",
    "prompt",
    "render",
    "render_analysis",
    "render_dashboard",
    "render_plan_groups",
    "render_prompt",
    "render_validation_errors",
    "serve",
    "set_runtime",
    "set_runtime_level",
]
