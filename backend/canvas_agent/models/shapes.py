"""Canvas object snapshot as read from the canvas store."""

from __future__ import annotations

from typing import Literal

from pydantic import Field

from canvas_agent.models.base import CamelModel

ShapeType = Literal["rectangle", "circle", "text", "line"]


class CanvasObject(CamelModel):
    """One stored shape. Position is always the top-left of its box."""

    id: str
    type: ShapeType
    x: float = 0.0
    y: float = 0.0
    width: float | None = None
    height: float | None = None
    fill: str | None = None
    stroke: str | None = None
    stroke_width: float | None = None
    opacity: float | None = None
    rotation: float | None = None
    corner_radius: float | None = None
    text: str | None = None
    font_size: float | None = None
    points: list[float] | None = None
    created_by: str | None = None
    created_at: float | None = None
    updated_at: float | None = None

    @property
    def radius(self) -> float | None:
        if self.type != "circle" or self.width is None:
            return None
        return min(self.width, self.height or self.width) / 2


class ShapeSeed(CamelModel):
    """Storage descriptor accepted by the store when creating a shape."""

    type: ShapeType
    x: float = 0.0
    y: float = 0.0
    width: float | None = None
    height: float | None = None
    fill: str | None = None
    stroke: str | None = None
    stroke_width: float | None = None
    opacity: float | None = None
    rotation: float | None = None
    corner_radius: float | None = None
    text: str | None = None
    font_size: float | None = None
    points: list[float] | None = None
    created_by: str | None = Field(default=None, description="User or agent that created the shape")
