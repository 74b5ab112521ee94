"""Utility helpers shared across CLI command modules."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Any, Optional, Sequence

import click
import typer

from fitplan.core.profile import UserProfile

logger = logging.getLogger(__name__)


def _cli():
    return sys.modules["fitplan.cli"]


def apply_log_override(log_level: Optional[str]) -> None:
    """Override logging level for the current invocation."""

    if not log_level or not isinstance(log_level, str):
        return
    try:
        _cli().set_runtime_level(log_level)
        logger.info("Log level overridden to %s", log_level.upper())
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc


def load_profile(path: Path) -> UserProfile:
    """Read and validate a profile JSON document.

    Raises:
        typer.BadParameter: If the file is unreadable or not a JSON object.
        ProfileValidationError: If a field violates its constraints.
    """

    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise typer.BadParameter(f"Cannot read profile {path}: {exc}") from exc
    if not isinstance(payload, dict):
        raise typer.BadParameter(f"Profile {path} must contain a JSON object.")
    return UserProfile.parse(payload)


def read_plan_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise typer.BadParameter(f"Cannot read plan {path}: {exc}") from exc


def prompt_value(label: str, current: str | None) -> str | None:
    """Prompt for a string value with an optional default."""

    default_display = current if current is not None else ""
    response = typer.prompt(label, default=default_display)
    return response.strip() or current


def prompt_int(label: str, minimum: int, maximum: int) -> int:
    """Prompt until an integer inside the inclusive range is given."""

    return typer.prompt(label, type=click.IntRange(minimum, maximum))


def prompt_float(label: str, minimum: float, maximum: float) -> float:
    return typer.prompt(label, type=click.FloatRange(minimum, maximum))


def prompt_choice(label: str, choices: Sequence[str]) -> str:
    return typer.prompt(label, type=click.Choice(list(choices)))


class MultiChoice(click.ParamType):
    """Comma-separated selection from a fixed option list; blank selects nothing."""

    name = "multi_choice"

    def __init__(self, options: Sequence[str]) -> None:
        self.options = tuple(options)

    def convert(self, value: Any, param: Optional[click.Parameter], ctx: Optional[click.Context]) -> list[str]:
        if isinstance(value, list):
            return value
        selected = [item.strip() for item in str(value).split(",") if item.strip()]
        unknown = [item for item in selected if item not in self.options]
        if unknown:
            self.fail(f"Unknown option(s): {', '.join(unknown)}", param, ctx)
        return selected


def prompt_multi(label: str, options: Sequence[str]) -> list[str]:
    """Prompt for a comma-separated selection, asking again on unknown options."""

    hint = ", ".join(options)
    return typer.prompt(
        f"{label} [{hint}]", default="", show_default=False, type=MultiChoice(options)
    )


def dump_json(payload: Any) -> str:
    return json.dumps(payload, indent=2, ensure_ascii=False)


__all__ = [
    "apply_log_override",
    "dump_json",
    "MultiChoice",
    "load_profile",
    "prompt_choice",
    "prompt_float",
    "prompt_int",
    "prompt_multi",
    "prompt_value",
    "read_plan_text",
]
