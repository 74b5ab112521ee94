"""HTTP surface: plan generation, PDF export and the static dashboard views."""

from __future__ import annotations

import logging

from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, Response

from ..core.errors import ExportFailed, GenerationFailed, ProfileValidationError
from ..core.orchestrator import Orchestrator
from ..core.profile import UserProfile
from ..services.dashboard_data import dashboard_overview, progress_analysis
from .dependencies import get_orchestrator
from .schemas import ErrorResponse, ExportRequest, GeneratedPlanResponse

logger = logging.getLogger(__name__)

app = FastAPI(title="FitPlan")


@app.exception_handler(RequestValidationError)
async def _validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    error = ProfileValidationError.from_pydantic(exc.errors())
    return JSONResponse(
        status_code=422,
        content={"error": "Invalid request", "fields": error.field_errors},
    )


@app.exception_handler(GenerationFailed)
async def _generation_failed_handler(request: Request, exc: GenerationFailed) -> JSONResponse:
    logger.error("Error generating plan: %s", exc)
    return JSONResponse(status_code=500, content={"error": "Failed to generate plan"})


@app.exception_handler(ExportFailed)
async def _export_failed_handler(request: Request, exc: ExportFailed) -> JSONResponse:
    logger.error("Error exporting plan: %s", exc)
    return JSONResponse(status_code=500, content={"error": "Failed to export plan"})


@app.get("/")
def read_root():
    return {"message": "FitPlan service is running"}


@app.post(
    "/api/generate",
    response_model=GeneratedPlanResponse,
    responses={422: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def generate_plan(
    profile: UserProfile, orchestrator: Orchestrator = Depends(get_orchestrator)
):
    result = orchestrator.execute("generate_plan", {"profile": profile})
    return {
        "plan": result["plan"],
        "groups": [group.as_dict() for group in result["groups"]],
    }


@app.post("/api/export", responses={500: {"model": ErrorResponse}})
def export_plan(
    request: ExportRequest, orchestrator: Orchestrator = Depends(get_orchestrator)
) -> Response:
    result = orchestrator.execute("export_plan", {"plan": request.plan})
    return Response(
        content=result["content"],
        media_type="application/pdf",
        headers={"Content-Disposition": f'attachment; filename="{result["filename"]}"'},
    )


@app.get("/api/dashboard")
def get_dashboard():
    return dashboard_overview()


@app.get("/api/analysis")
def get_analysis():
    return progress_analysis()
