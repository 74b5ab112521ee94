"""Service wiring shared by the CLI and the HTTP app."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from ..services.config_service import ConfigService
from ..services.plan_exporter import PlanExporter
from ..services.plan_generator import PlanGenerator
from ..services.prompt_service import PromptService
from ..workflows.export_plan import ExportPlanWorkflow
from ..workflows.generate_plan import GeneratePlanWorkflow
from .llm_gateway import LLMGateway
from .logging_setup import configure_logging
from .orchestrator import Orchestrator

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class Runtime:
    config_service: ConfigService
    orchestrator: Orchestrator
    plan_generator: PlanGenerator
    exporter: PlanExporter


def build_runtime(
    config_path: Path | None = None, prompts_path: Path | None = None
) -> Runtime:
    """Load configuration, configure logging and register the workflows."""

    config_service = ConfigService(config_path=config_path)
    configure_logging(
        config_service.logging_config,
        service=config_service.app_metadata.get("name", "fitplan"),
    )

    llm_gateway = LLMGateway(config_service=config_service)
    plan_generator = PlanGenerator(
        llm_gateway=llm_gateway, prompt_service=PromptService(base_path=prompts_path)
    )
    exporter = PlanExporter(config_service.export_config)
    orchestrator = Orchestrator.from_workflows(
        GeneratePlanWorkflow(plan_generator=plan_generator),
        ExportPlanWorkflow(exporter=exporter),
    )
    logger.debug("Runtime initialised with workflows=%s", sorted(orchestrator.workflows))
    return Runtime(
        config_service=config_service,
        orchestrator=orchestrator,
        plan_generator=plan_generator,
        exporter=exporter,
    )
