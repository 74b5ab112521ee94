"""Plan commands for the FitPlan CLI."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Any, Optional

import typer

from fitplan.cli.form import collect_profile
from fitplan.cli.io import console
from fitplan.cli.renderers import render_plan_groups, render_prompt, render_validation_errors
from fitplan.cli.state import PlanSession
from fitplan.cli.utils import apply_log_override, dump_json, load_profile, read_plan_text
from fitplan.core.errors import ExportFailed, GenerationFailed, ProfileValidationError
from fitplan.core.profile import UserProfile
from fitplan.services.plan_renderer import render_plan

logger = logging.getLogger(__name__)

PLAN_TITLE = "Your Personalized Fitness Journey"


def _cli() -> Any:
    return sys.modules["fitplan.cli"]


def _resolve_profile(profile_path: Optional[Path], session: PlanSession) -> UserProfile:
    try:
        if profile_path is not None:
            return load_profile(profile_path)
        return collect_profile(session)
    except ProfileValidationError as exc:
        render_validation_errors(exc.field_errors)
        raise typer.Exit(code=2) from exc


def generate(
    profile_path: Optional[Path] = typer.Option(
        None,
        "--profile",
        "-p",
        help="Profile JSON file. Without it the interactive form is shown.",
    ),
    export: Optional[Path] = typer.Option(
        None, "--export", "-e", help="Also write the plan to this PDF file."
    ),
    raw: bool = typer.Option(
        False, "--raw", help="Print the plan text without formatting."
    ),
    as_json: bool = typer.Option(
        False, "--json", help="Print the plan and its classified groups as JSON."
    ),
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        "-l",
        help="Override logging level for this invocation (e.g., DEBUG, INFO).",
    ),
) -> None:
    """Collect a profile and generate a fitness and nutrition plan."""

    apply_log_override(log_level)

    session = PlanSession()
    profile = _resolve_profile(profile_path, session)
    orchestrator = _cli().get_orchestrator()

    with console.status("Generating..."):
        try:
            result = session.submit(orchestrator, profile)
        except GenerationFailed as exc:
            console.print("[red]Failed to generate plan. Please try again.[/]")
            raise typer.Exit(code=1) from exc

    if as_json:
        console.print_json(
            dump_json(
                {"plan": session.plan, "groups": [group.as_dict() for group in session.groups]}
            )
        )
    elif raw:
        console.print(result["plan"], markup=False, highlight=False)
    else:
        render_plan_groups(session.groups, title=PLAN_TITLE)

    if export is not None:
        _export_session(session, orchestrator, export)


def _export_session(session: PlanSession, orchestrator: Any, destination: Path) -> None:
    with console.status("Downloading..."):
        try:
            path = session.export(orchestrator, destination)
        except (ExportFailed, ValueError) as exc:
            console.print(f"[red]Failed to export plan: {exc}[/]")
            raise typer.Exit(code=1) from exc
    console.print(f"[green]Plan saved to {path}[/]")


def prompt(
    profile_path: Path = typer.Option(..., "--profile", "-p", help="Profile JSON file."),
    log_level: str | None = typer.Option(
        None, "--log-level", "-l", help="Override logging level for this invocation."
    ),
) -> None:
    """Show the prompt that would be sent for a profile, without calling the model."""

    apply_log_override(log_level)
    session = PlanSession()
    profile = _resolve_profile(profile_path, session)
    render_prompt(_cli().get_runtime().plan_generator.build_prompt(profile))


def render(
    plan_file: Path = typer.Argument(..., help="Plan text file to display."),
    as_json: bool = typer.Option(False, "--json", help="Print classified groups as JSON."),
    log_level: str | None = typer.Option(
        None, "--log-level", "-l", help="Override logging level for this invocation."
    ),
) -> None:
    """Display a previously generated plan file."""

    apply_log_override(log_level)
    groups = render_plan(read_plan_text(plan_file))
    if as_json:
        console.print_json(dump_json([group.as_dict() for group in groups]))
        return
    render_plan_groups(groups, title=PLAN_TITLE)


def export(
    plan_file: Path = typer.Argument(..., help="Plan text file to export."),
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help="Destination PDF (default: configured file name)."
    ),
    log_level: str | None = typer.Option(
        None, "--log-level", "-l", help="Override logging level for this invocation."
    ),
) -> None:
    """Export a plan text file to PDF."""

    apply_log_override(log_level)
    plan_text = read_plan_text(plan_file)
    if not plan_text.strip():
        raise typer.BadParameter(f"Plan file {plan_file} is empty.")
    runtime = _cli().get_runtime()
    session = PlanSession(plan=plan_text)
    destination = output or Path(runtime.exporter.default_filename)
    _export_session(session, runtime.orchestrator, destination)
