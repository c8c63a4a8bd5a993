"""API request models."""

from __future__ import annotations

from typing import Any

from pydantic import Field

from canvas_agent.models.base import CamelModel
from canvas_agent.models.plan import Plan
from canvas_agent.models.shapes import CanvasObject, ShapeSeed, ShapeType


class SeedShapesRequest(CamelModel):
    shapes: list[ShapeSeed] = Field(default_factory=list, description="Explicit shapes to add")
    random_count: int = Field(default=0, ge=0, le=1000, description="Random shapes to add after the explicit ones")
    types: list[ShapeType] | None = Field(default=None, description="Restrict random shapes to these types")
    clear: bool = Field(default=False, description="Clear the canvas first")
    seed: int | None = Field(default=None, description="RNG seed for reproducible random shapes")


class ContextRequest(CamelModel):
    instruction: str = Field(..., description="Natural-language instruction")
    shapes: list[CanvasObject] | None = Field(
        default=None,
        description="Canvas snapshot; the stored canvas is used when omitted",
    )
    canvas_id: str | None = None
    include_header: bool = True


class ValidateRequest(CamelModel):
    tool: str = Field(..., description="Operation name")
    args: dict[str, Any] = Field(default_factory=dict)


class ExecutePlanRequest(Plan):
    canvas_id: str | None = None
    user_id: str = "ai-agent"


class CommandRequest(CamelModel):
    instruction: str = Field(..., min_length=1, description="Natural-language instruction")
    canvas_id: str | None = None
    user_id: str | None = Field(default=None, description="Requesting user; their shapes drive style inference")
