"""Named workflow registry used by the CLI and the HTTP app."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from time import perf_counter
from typing import Any, Protocol

from .errors import FitPlanError

logger = logging.getLogger(__name__)


class Workflow(Protocol):
    name: str

    def run(self, context: dict[str, Any]) -> dict[str, Any]:
        ...


@dataclass(slots=True)
class Orchestrator:
    """Dispatch a context to the workflow registered under a name.

    Each run is timed. Plan errors (``FitPlanError``) are logged as warnings
    without a traceback since the caller reports them to the user; anything
    else is logged with its traceback. Both are re-raised unchanged.
    """

    workflows: dict[str, Workflow] = field(default_factory=dict)

    @classmethod
    def from_workflows(cls, *workflows: Workflow) -> "Orchestrator":
        orchestrator = cls()
        for workflow in workflows:
            orchestrator.register(workflow)
        return orchestrator

    def register(self, workflow: Workflow) -> None:
        if workflow.name in self.workflows:
            raise ValueError(f"Workflow '{workflow.name}' is already registered.")
        self.workflows[workflow.name] = workflow

    def execute(self, workflow_name: str, context: dict[str, Any]) -> dict[str, Any]:
        try:
            workflow = self.workflows[workflow_name]
        except KeyError:
            raise KeyError(f"Workflow '{workflow_name}' is not registered.") from None

        started = perf_counter()
        try:
            outcome = workflow.run(context)
        except FitPlanError as exc:
            logger.warning(
                "workflow_failed",
                extra=_log_fields(workflow_name, started, error=str(exc), error_type=type(exc).__name__),
            )
            raise
        except Exception as exc:
            logger.error(
                "workflow_failed",
                extra=_log_fields(workflow_name, started, error=str(exc), error_type=type(exc).__name__),
                exc_info=True,
            )
            raise

        logger.info(
            "workflow_completed",
            extra=_log_fields(
                workflow_name,
                started,
                context_keys=sorted(context),
                outcome_keys=sorted(outcome),
            ),
        )
        return outcome


def _log_fields(workflow_name: str, started: float, **fields: Any) -> dict[str, Any]:
    elapsed = round((perf_counter() - started) * 1000, 2)
    return {"workflow": workflow_name, "duration_ms": elapsed, **fields}
