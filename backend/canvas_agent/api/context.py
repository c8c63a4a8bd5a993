"""POST /api/context -- the minimized canvas context the planner would see."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from canvas_agent.canvas.store import InMemoryCanvasStore
from canvas_agent.config import settings
from canvas_agent.context.minimizer import build_context, classify
from canvas_agent.dependencies import get_store
from canvas_agent.models.requests import ContextRequest
from canvas_agent.models.responses import ContextResponse

router = APIRouter()


@router.post("/context", response_model=ContextResponse)
async def minimized_context(req: ContextRequest, store: InMemoryCanvasStore = Depends(get_store)) -> ContextResponse:
    shapes = req.shapes
    if shapes is None:
        shapes = await store.list_shapes(req.canvas_id or settings.default_canvas_id)

    return ContextResponse(
        intent=classify(req.instruction).value,
        context=build_context(req.instruction, shapes, req.include_header, settings.context_default_limit),
        shape_count=len(shapes),
    )
