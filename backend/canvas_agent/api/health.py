"""Health check."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from canvas_agent.dependencies import get_registry
from canvas_agent.engine.registry import ToolRegistry
from canvas_agent.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health(registry: ToolRegistry = Depends(get_registry)) -> HealthResponse:
    return HealthResponse(status="ok", version="0.1.0", tools_registered=registry.count)
