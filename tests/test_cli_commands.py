from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List

import pytest
from typer.testing import CliRunner

import fitplan.cli as cli
from fitplan.core.errors import ExportFailed, GenerationFailed
from fitplan.core.profile import UserProfile
from tests.helpers.cli import (
    SAMPLE_PLAN,
    RecordingOrchestrator,
    build_default_handlers,
    mute_console,
    patch_runtime,
)

runner = CliRunner()


@pytest.fixture()
def orchestrator(monkeypatch: pytest.MonkeyPatch) -> RecordingOrchestrator:
    recording = RecordingOrchestrator(handlers=build_default_handlers())
    patch_runtime(monkeypatch, recording)
    return recording


@pytest.fixture()
def printed(monkeypatch: pytest.MonkeyPatch) -> List[Any]:
    captured: List[Any] = []
    monkeypatch.setattr(cli.console, "print", lambda *args, **kwargs: captured.extend(args))
    monkeypatch.setattr(cli.console, "print_json", lambda data, **kwargs: captured.append(data))
    return captured


@pytest.fixture()
def profile_file(tmp_path: Path, profile_payload: Dict[str, Any]) -> Path:
    path = tmp_path / "profile.json"
    path.write_text(json.dumps(profile_payload), encoding="utf-8")
    return path


def test_generate_from_profile_file(
    orchestrator: RecordingOrchestrator, profile_file: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    mute_console(monkeypatch)

    result = runner.invoke(cli.app, ["generate", "--profile", str(profile_file)])

    assert result.exit_code == 0, result.output
    assert len(orchestrator.calls) == 1
    workflow, context = orchestrator.calls[0]
    assert workflow == "generate_plan"
    assert isinstance(context["profile"], UserProfile)


def test_generate_raw_prints_plan_text(
    orchestrator: RecordingOrchestrator, profile_file: Path, printed: List[Any]
) -> None:
    result = runner.invoke(cli.app, ["generate", "-p", str(profile_file), "--raw"])

    assert result.exit_code == 0, result.output
    assert SAMPLE_PLAN in printed


def test_generate_json_includes_groups(
    orchestrator: RecordingOrchestrator, profile_file: Path, printed: List[Any]
) -> None:
    result = runner.invoke(cli.app, ["generate", "-p", str(profile_file), "--json"])

    assert result.exit_code == 0, result.output
    payload = json.loads(printed[-1])
    assert payload["plan"] == SAMPLE_PLAN
    assert [group["variant"] for group in payload["groups"]] == ["A", "B"]


def test_generate_invalid_profile_exits_before_calling_service(
    orchestrator: RecordingOrchestrator,
    tmp_path: Path,
    profile_payload: Dict[str, Any],
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    mute_console(monkeypatch)
    path = tmp_path / "profile.json"
    path.write_text(json.dumps({**profile_payload, "age": 12}), encoding="utf-8")

    result = runner.invoke(cli.app, ["generate", "-p", str(path)])

    assert result.exit_code == 2
    assert orchestrator.calls == []


def test_generate_failure_reports_and_exits(
    orchestrator: RecordingOrchestrator, profile_file: Path, printed: List[Any]
) -> None:
    def failing(context: Dict[str, Any], _: RecordingOrchestrator) -> Dict[str, Any]:
        raise GenerationFailed("no text")

    orchestrator.handlers["generate_plan"] = failing

    result = runner.invoke(cli.app, ["generate", "-p", str(profile_file)])

    assert result.exit_code == 1
    assert any("Failed to generate plan" in str(item) for item in printed)


def test_generate_with_export_writes_pdf(
    orchestrator: RecordingOrchestrator,
    profile_file: Path,
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    mute_console(monkeypatch)
    target = tmp_path / "plan.pdf"

    result = runner.invoke(cli.app, ["generate", "-p", str(profile_file), "--export", str(target)])

    assert result.exit_code == 0, result.output
    assert [call[0] for call in orchestrator.calls] == ["generate_plan", "export_plan"]
    assert orchestrator.calls[1][1]["plan"] == SAMPLE_PLAN
    assert target.exists()


def test_generate_interactive_form(
    orchestrator: RecordingOrchestrator, monkeypatch: pytest.MonkeyPatch
) -> None:
    mute_console(monkeypatch)
    answers = "\n".join(
        [
            "34",
            "female",
            "metric",
            "168",
            "62",
            "weight_loss",
            "moderate",
            "beginner",
            "30 minutes",
            "15 minutes",
            "dumbbells, yoga_mat",
            "",
            "vegetarian",
            "Night shifts",
        ]
    )

    result = runner.invoke(cli.app, ["generate"], input=answers + "\n")

    assert result.exit_code == 0, result.output
    profile = orchestrator.calls[0][1]["profile"]
    assert profile.height_cm == 168
    assert profile.equipment == ("dumbbells", "yoga_mat")
    assert profile.dietary_restrictions == ()
    assert profile.diet_preferences == ("vegetarian",)
    assert profile.additional_notes == "Night shifts"


def test_generate_interactive_form_asks_again_after_unknown_option(
    orchestrator: RecordingOrchestrator, monkeypatch: pytest.MonkeyPatch
) -> None:
    mute_console(monkeypatch)
    answers = "\n".join(
        [
            "41",
            "male",
            "metric",
            "180",
            "85",
            "endurance",
            "active",
            "advanced",
            "60 minutes",
            "30 minutes",
            "dumbells, yoga_mat",
            "dumbbells, yoga_mat",
            "gluten_free",
            "",
            "",
        ]
    )

    result = runner.invoke(cli.app, ["generate"], input=answers + "\n")

    assert result.exit_code == 0, result.output
    assert "Unknown option(s): dumbells" in result.output
    profile = orchestrator.calls[0][1]["profile"]
    assert profile.age == 41
    assert profile.equipment == ("dumbbells", "yoga_mat")
    assert profile.dietary_restrictions == ("gluten_free",)


def test_prompt_shows_prompt_without_generating(
    orchestrator: RecordingOrchestrator, profile_file: Path, printed: List[Any]
) -> None:
    result = runner.invoke(cli.app, ["prompt", "-p", str(profile_file)])

    assert result.exit_code == 0, result.output
    assert orchestrator.calls == []
    assert printed[0].renderable.plain == "Prompt for a 34-year-old"


def test_render_json_classifies_plan_file(tmp_path: Path, printed: List[Any]) -> None:
    plan_file = tmp_path / "plan.txt"
    plan_file.write_text(SAMPLE_PLAN, encoding="utf-8")

    result = runner.invoke(cli.app, ["render", str(plan_file), "--json"])

    assert result.exit_code == 0, result.output
    groups = json.loads(printed[-1])
    assert groups[0]["blocks"][1] == {"kind": "bullet", "text": "Squats 3x10"}


def test_export_plan_file(
    orchestrator: RecordingOrchestrator, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    mute_console(monkeypatch)
    plan_file = tmp_path / "plan.txt"
    plan_file.write_text(SAMPLE_PLAN, encoding="utf-8")
    target = tmp_path / "exported.pdf"

    result = runner.invoke(cli.app, ["export", str(plan_file), "-o", str(target)])

    assert result.exit_code == 0, result.output
    assert orchestrator.calls[0] == ("export_plan", {"plan": SAMPLE_PLAN, "destination": target})
    assert target.exists()


def test_export_failure_exits(
    orchestrator: RecordingOrchestrator, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    mute_console(monkeypatch)

    def failing(context: Dict[str, Any], _: RecordingOrchestrator) -> Dict[str, Any]:
        raise ExportFailed("disk full")

    orchestrator.handlers["export_plan"] = failing
    plan_file = tmp_path / "plan.txt"
    plan_file.write_text(SAMPLE_PLAN, encoding="utf-8")

    result = runner.invoke(cli.app, ["export", str(plan_file), "-o", str(tmp_path / "x.pdf")])

    assert result.exit_code == 1


@pytest.mark.parametrize("content", ["", "  \n\n  "])
def test_export_blank_plan_file_is_usage_error(
    orchestrator: RecordingOrchestrator,
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    content: str,
) -> None:
    mute_console(monkeypatch)
    plan_file = tmp_path / "plan.txt"
    plan_file.write_text(content, encoding="utf-8")
    target = tmp_path / "x.pdf"

    result = runner.invoke(cli.app, ["export", str(plan_file), "-o", str(target)])

    assert result.exit_code == 2
    assert not isinstance(result.exception, ValueError)
    assert orchestrator.calls == []
    assert not target.exists()


def test_export_missing_plan_file_is_usage_error(
    orchestrator: RecordingOrchestrator, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    mute_console(monkeypatch)

    result = runner.invoke(cli.app, ["export", str(tmp_path / "absent.txt")])

    assert result.exit_code == 2
    assert orchestrator.calls == []


def test_invalid_log_level_is_rejected(
    orchestrator: RecordingOrchestrator, profile_file: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    mute_console(monkeypatch)

    result = runner.invoke(cli.app, ["generate", "-p", str(profile_file), "--log-level", "chatty"])

    assert result.exit_code == 2
    assert orchestrator.calls == []


def test_dashboard_and_analysis_render(monkeypatch: pytest.MonkeyPatch) -> None:
    mute_console(monkeypatch)

    assert runner.invoke(cli.app, ["dashboard"]).exit_code == 0
    assert runner.invoke(cli.app, ["analysis"]).exit_code == 0


def test_serve_uses_configured_bind(
    orchestrator: RecordingOrchestrator, monkeypatch: pytest.MonkeyPatch
) -> None:
    import uvicorn

    captured: Dict[str, Any] = {}
    monkeypatch.setattr(uvicorn, "run", lambda app, **kwargs: captured.update(app=app, **kwargs))

    result = runner.invoke(cli.app, ["serve", "--port", "9001"])

    assert result.exit_code == 0, result.output
    assert captured["app"] == "fitplan.api.app:app"
    assert captured["host"] == "127.0.0.1"
    assert captured["port"] == 9001
