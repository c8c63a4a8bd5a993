"""API response models."""

from __future__ import annotations

from typing import Any

from pydantic import Field

from canvas_agent.models.base import CamelModel
from canvas_agent.models.plan import StepResult
from canvas_agent.models.shapes import CanvasObject


class HealthResponse(CamelModel):
    status: str = "ok"
    version: str = "0.1.0"
    tools_registered: int = 0


class ToolsResponse(CamelModel):
    tools: list[dict[str, Any]] = Field(default_factory=list)


class ShapesResponse(CamelModel):
    canvas_id: str
    count: int = 0
    shapes: list[CanvasObject] = Field(default_factory=list)


class ContextResponse(CamelModel):
    intent: str
    context: str
    shape_count: int = 0


class FieldError(CamelModel):
    field_path: str
    message: str


class ValidateResponse(CamelModel):
    valid: bool
    tool: str
    args: dict[str, Any] | None = None
    errors: list[FieldError] = Field(default_factory=list)


class ExecutePlanResponse(CamelModel):
    canvas_id: str
    results: list[StepResult] = Field(default_factory=list)
    shape_count: int = 0
