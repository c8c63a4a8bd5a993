"""GET /api/tools -- registered operations with their argument schemas."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from canvas_agent.dependencies import get_registry
from canvas_agent.engine.registry import ToolRegistry
from canvas_agent.models.responses import ToolsResponse

router = APIRouter()


@router.get("/tools", response_model=ToolsResponse)
async def list_tools(registry: ToolRegistry = Depends(get_registry)) -> ToolsResponse:
    return ToolsResponse(tools=registry.definitions())
