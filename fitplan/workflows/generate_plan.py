"""Generate plan workflow.

Updates:
    v0.1.0 - 2026-10-19 - Profile to rendered plan groups.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..core.profile import UserProfile
from ..services.plan_generator import PlanGenerator
from ..services.plan_renderer import render_plan


@dataclass
class GeneratePlanWorkflow:
    plan_generator: PlanGenerator
    name: str = "generate_plan"

    def run(self, context: dict) -> dict:
        """Run the generate_plan workflow.

        Args:
            context (dict): Payload containing a validated `profile`.

        Returns:
            dict: `plan` text, its rendered `groups`, and the `prompt` sent.

        Raises:
            ValueError: If no profile is provided.
            GenerationFailed: If the service returns no usable plan.
        """

        profile = context.get("profile")
        if not isinstance(profile, UserProfile):
            raise ValueError("Context missing 'profile'.")
        result = self.plan_generator.generate(profile)
        return {**result, "groups": render_plan(result["plan"])}
