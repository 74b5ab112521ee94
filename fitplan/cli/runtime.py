"""Runtime wiring for the FitPlan CLI."""

from __future__ import annotations

import logging

from fitplan.core.bootstrap import Runtime, build_runtime
from fitplan.core.logging_setup import set_runtime_level  # re-export via utils
from fitplan.core.orchestrator import Orchestrator

logger = logging.getLogger(__name__)

_RUNTIME_CACHE: Runtime | None = None


def initialize_runtime() -> Runtime:
    """Build services from the configuration directories."""

    runtime = build_runtime()
    logger.debug("CLI runtime initialised.")
    return runtime


def get_runtime() -> Runtime:
    """Return the lazily-initialized runtime."""

    global _RUNTIME_CACHE
    if _RUNTIME_CACHE is None:
        _RUNTIME_CACHE = initialize_runtime()
    return _RUNTIME_CACHE


def set_runtime(runtime: Runtime | None) -> None:
    """Replace the cached runtime (`None` forces a rebuild on next use)."""

    global _RUNTIME_CACHE
    _RUNTIME_CACHE = runtime


def get_orchestrator() -> Orchestrator:
    return get_runtime().orchestrator


__all__ = [
    "get_orchestrator",
    "get_runtime",
    "initialize_runtime",
    "set_runtime",
    "set_runtime_level",
]
