from __future__ import annotations

import re
from pathlib import Path

import pytest

from fitplan.core.errors import ExportFailed
from fitplan.services.config_service import ExportConfig
from fitplan.services.plan_exporter import PlanExporter

PLAN = (
    "# Exercise Plan\n"
    "- Squats <3x10> & lunges\n"
    "1. Warm up first\n"
    "\n"
    "Weekly Schedule\n"
    "Rest on Sundays."
)


def test_export_bytes_produces_pdf() -> None:
    payload = PlanExporter().export_bytes(PLAN)

    assert payload.startswith(b"%PDF")


def test_export_bytes_handles_empty_plan() -> None:
    assert PlanExporter().export_bytes("").startswith(b"%PDF")


def test_long_plan_paginates() -> None:
    long_plan = "\n\n".join(f"{index}. Repeat the circuit" for index in range(1, 400))

    payload = PlanExporter().export_bytes(long_plan)

    page_counts = [int(value) for value in re.findall(rb"/Count (\d+)", payload)]
    assert max(page_counts) > 1


def test_export_writes_file(tmp_path: Path) -> None:
    target = tmp_path / "out" / "plan.pdf"

    written = PlanExporter(ExportConfig(filename="ignored.pdf")).export(PLAN, target)

    assert written == target
    assert target.read_bytes().startswith(b"%PDF")


def test_export_uses_configured_filename(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    exporter = PlanExporter(ExportConfig(filename="my-plan.pdf"))

    written = exporter.export(PLAN)

    assert exporter.default_filename == "my-plan.pdf"
    assert written == Path("my-plan.pdf")
    assert (tmp_path / "my-plan.pdf").exists()


def test_export_failure_raises_export_failed(tmp_path: Path) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory", encoding="utf-8")

    with pytest.raises(ExportFailed):
        PlanExporter().export(PLAN, blocker / "plan.pdf")
