"""ExecutionContext: what a canvas action gets besides its validated arguments."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import numpy as np

from canvas_agent.canvas.geometry import Viewport

if TYPE_CHECKING:
    from canvas_agent.canvas.store import CanvasStore
    from canvas_agent.models.shapes import ShapeSeed


@dataclass(frozen=True)
class ExecutionContext:
    """Target canvas identity plus the store that owns it. One per plan run."""

    canvas_id: str
    store: "CanvasStore"
    user_id: str = "ai-agent"
    viewport: Viewport | None = None
    # Seedable source for generators that place shapes at random
    rng: np.random.Generator = field(default_factory=np.random.default_rng)

    def stamp(self, seeds: list["ShapeSeed"]) -> list["ShapeSeed"]:
        """Mark new shapes as created by this run's user."""
        return [s.model_copy(update={"created_by": self.user_id}) for s in seeds]


@dataclass
class ActionResult:
    """Return value of a canvas action: affected shape ids plus a short summary."""

    shape_ids: list[str] = field(default_factory=list)
    message: str = ""
