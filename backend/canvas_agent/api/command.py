"""POST /api/command -- natural-language instruction through the full agent."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from canvas_agent.canvas.store import InMemoryCanvasStore
from canvas_agent.config import Settings
from canvas_agent.dependencies import get_executor, get_settings, get_store
from canvas_agent.engine.agent import AgentResult, run_command
from canvas_agent.engine.context import ExecutionContext
from canvas_agent.engine.executor import PlanExecutor
from canvas_agent.models.requests import CommandRequest

router = APIRouter()


@router.post("/command", response_model=AgentResult)
async def command(
    req: CommandRequest,
    store: InMemoryCanvasStore = Depends(get_store),
    executor: PlanExecutor = Depends(get_executor),
    settings: Settings = Depends(get_settings),
) -> AgentResult:
    ctx = ExecutionContext(
        canvas_id=req.canvas_id or settings.default_canvas_id,
        store=store,
        user_id=req.user_id or "ai-agent",
    )
    return await run_command(req.instruction, ctx, executor, user_id=req.user_id)
