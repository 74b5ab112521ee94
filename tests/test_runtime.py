from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List

import pytest

import fitplan.cli as cli
from fitplan.core.bootstrap import build_runtime
from fitplan.core.errors import GenerationFailed
from fitplan.core.profile import UserProfile

PLAN = "# Exercise Plan\n- Squats 3x10\n\nNutrition Plan\n1. Breakfast: oats"


@pytest.fixture()
def fake_completion(monkeypatch: pytest.MonkeyPatch) -> List[Dict[str, Any]]:
    calls: List[Dict[str, Any]] = []

    def completion(*, messages: List[Dict[str, str]], **kwargs: Any) -> Dict[str, Any]:
        calls.append({"messages": messages, **kwargs})
        return {"choices": [{"message": {"content": PLAN}}]}

    monkeypatch.setattr("fitplan.core.llm_gateway.completion", completion)
    return calls


def test_runtime_generates_and_exports(
    config_dir: Path,
    fake_completion: List[Dict[str, Any]],
    profile_payload: Dict[str, Any],
    tmp_path: Path,
) -> None:
    runtime = build_runtime(config_path=config_dir)

    result = runtime.orchestrator.execute(
        "generate_plan", {"profile": UserProfile.parse(profile_payload)}
    )

    assert result["plan"] == PLAN
    assert [group.blocks[0].topic for group in result["groups"]] == ["exercise", "nutrition"]
    assert "34-year-old female" in fake_completion[0]["messages"][0]["content"]

    exported = runtime.orchestrator.execute(
        "export_plan", {"plan": result["plan"], "destination": tmp_path / "plan.pdf"}
    )
    assert exported["path"].read_bytes().startswith(b"%PDF")


def test_runtime_surfaces_generation_failure(
    config_dir: Path, monkeypatch: pytest.MonkeyPatch, profile_payload: Dict[str, Any]
) -> None:
    monkeypatch.setattr(
        "fitplan.core.llm_gateway.completion",
        lambda **_: {"choices": [{"message": {"content": ""}}]},
    )
    runtime = build_runtime(config_path=config_dir)

    with pytest.raises(GenerationFailed):
        runtime.orchestrator.execute(
            "generate_plan", {"profile": UserProfile.parse(profile_payload)}
        )


def test_cli_runtime_is_cached(config_dir: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    built: List[object] = []

    def fake_initialize() -> object:
        built.append(object())
        return built[-1]

    monkeypatch.setattr("fitplan.cli.runtime.initialize_runtime", fake_initialize)
    cli.set_runtime(None)

    first = cli.get_runtime()
    second = cli.get_runtime()

    assert first is second
    assert len(built) == 1
    cli.set_runtime(None)
