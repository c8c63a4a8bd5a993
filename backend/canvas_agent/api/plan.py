"""POST /api/plan/execute -- run an explicit plan against a canvas."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from canvas_agent.canvas.store import InMemoryCanvasStore
from canvas_agent.config import Settings
from canvas_agent.dependencies import get_executor, get_settings, get_store
from canvas_agent.engine.context import ExecutionContext
from canvas_agent.engine.executor import PlanExecutor
from canvas_agent.models.requests import ExecutePlanRequest
from canvas_agent.models.responses import ExecutePlanResponse

router = APIRouter()


@router.post("/plan/execute", response_model=ExecutePlanResponse)
async def execute_plan(
    req: ExecutePlanRequest,
    store: InMemoryCanvasStore = Depends(get_store),
    executor: PlanExecutor = Depends(get_executor),
    settings: Settings = Depends(get_settings),
) -> ExecutePlanResponse:
    """Plan errors propagate to the app-level handler as HTTP 422."""
    canvas_id = req.canvas_id or settings.default_canvas_id
    ctx = ExecutionContext(canvas_id=canvas_id, store=store, user_id=req.user_id)
    results = await executor.execute(req, ctx)
    shapes = await store.list_shapes(canvas_id)
    return ExecutePlanResponse(canvas_id=canvas_id, results=results, shape_count=len(shapes))
