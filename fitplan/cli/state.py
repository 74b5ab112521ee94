"""Per-invocation view state for the plan form and its result."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional, TYPE_CHECKING

from fitplan.core.profile import UserProfile
from fitplan.services.plan_renderer import PlanGroup

if TYPE_CHECKING:
    from fitplan.core.orchestrator import Orchestrator

logger = logging.getLogger(__name__)

FORM_STEPS: tuple[str, ...] = (
    "Personal Information",
    "Fitness Goals",
    "Preferences",
)


@dataclass
class PlanSession:
    """Form progress and the currently displayed plan.

    One instance lives for a single CLI invocation; nothing is persisted.
    """

    step: int = 1
    plan: Optional[str] = None
    groups: list[PlanGroup] = field(default_factory=list)
    is_loading: bool = False
    is_downloading: bool = False

    @property
    def step_title(self) -> str:
        return FORM_STEPS[self.step - 1]

    @property
    def on_last_step(self) -> bool:
        return self.step == len(FORM_STEPS)

    def advance(self) -> None:
        self.step = min(self.step + 1, len(FORM_STEPS))

    def submit(self, orchestrator: "Orchestrator", profile: UserProfile) -> dict[str, Any]:
        """Generate a plan and make it the displayed plan.

        The displayed plan is only replaced on success; a `GenerationFailed`
        propagates with the previous plan left in place.
        """

        self.is_loading = True
        try:
            result = orchestrator.execute("generate_plan", {"profile": profile})
        finally:
            self.is_loading = False
        self.plan = result["plan"]
        self.groups = list(result["groups"])
        return result

    def export(self, orchestrator: "Orchestrator", destination: Path) -> Path:
        """Write the displayed plan to a PDF file.

        Raises:
            ValueError: If there is no plan to export.
            ExportFailed: If the document cannot be produced.
        """

        if not self.plan:
            raise ValueError("No plan to export. Generate a plan first.")
        self.is_downloading = True
        try:
            result = orchestrator.execute(
                "export_plan", {"plan": self.plan, "destination": destination}
            )
        finally:
            self.is_downloading = False
        return Path(result["path"])


__all__ = ["FORM_STEPS", "PlanSession"]
