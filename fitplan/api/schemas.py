from typing import Optional

from pydantic import BaseModel, Field


class RenderedBlockSchema(BaseModel):
    kind: str
    text: str
    ordinal: Optional[str] = None
    topic: Optional[str] = None


class PlanGroupSchema(BaseModel):
    index: int
    variant: str
    blocks: list[RenderedBlockSchema]


class GeneratedPlanResponse(BaseModel):
    plan: str
    groups: list[PlanGroupSchema]


class ExportRequest(BaseModel):
    plan: str = Field(min_length=1)


class ErrorResponse(BaseModel):
    error: str
    fields: dict[str, str] | None = None
