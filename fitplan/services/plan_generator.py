"""Plan generation service.

Updates:
    v0.1.0 - 2026-10-19 - Profile-driven plan requests through the LLM gateway.
"""

from __future__ import annotations

import logging
from typing import Dict

from ..core.llm_gateway import LLMGateway
from ..core.profile import UserProfile
from .plan_prompt import PROMPT_NAME, build_plan_prompt
from .prompt_service import PromptService

logger = logging.getLogger(__name__)


class PlanGenerator:
    """Turns a user profile into a generated fitness and nutrition plan."""

    WORKFLOW = "generate_plan"

    def __init__(self, llm_gateway: LLMGateway, prompt_service: PromptService) -> None:
        """Store collaborators.

        Args:
            llm_gateway (LLMGateway): Gateway used to invoke the generate_plan workflow.
            prompt_service (PromptService): Source of the plan prompt template.
        """

        self._llm = llm_gateway
        self._prompts = prompt_service

    def build_prompt(self, profile: UserProfile) -> str:
        """Return the prompt that `generate` would send for this profile."""

        return build_plan_prompt(profile, self._prompts.get_prompt(PROMPT_NAME))

    def generate(self, profile: UserProfile) -> Dict[str, str]:
        """Generate a plan for the supplied profile.

        Each call performs one outbound request; identical profiles are not
        cached or deduplicated.

        Returns:
            dict[str, str]: Workflow name, the prompt sent, and the plan text.

        Raises:
            GenerationFailed: Propagated from the gateway when no usable text returns.
        """

        prompt = self.build_prompt(profile)
        logger.info(
            "plan_requested",
            extra={"goal": profile.goal.value, "prompt_chars": len(prompt)},
        )
        plan = self._llm.invoke(self.WORKFLOW, prompt)
        return {"workflow": self.WORKFLOW, "prompt": prompt, "plan": plan}
