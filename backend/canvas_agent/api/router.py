"""Master API router: mounts all endpoint routers."""

from __future__ import annotations

from fastapi import APIRouter

from canvas_agent.api import canvas, command, context, health, plan, tools, validate

api_router = APIRouter(prefix="/api")

api_router.include_router(health.router)
api_router.include_router(tools.router)
api_router.include_router(canvas.router)
api_router.include_router(context.router)
api_router.include_router(validate.router)
api_router.include_router(plan.router)
api_router.include_router(command.router)
