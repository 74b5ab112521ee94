from functools import lru_cache

from fastapi import Depends

from ..core.bootstrap import Runtime, build_runtime
from ..core.orchestrator import Orchestrator


@lru_cache(maxsize=1)
def get_runtime() -> Runtime:
    return build_runtime()


def get_orchestrator(runtime: Runtime = Depends(get_runtime)) -> Orchestrator:
    return runtime.orchestrator
