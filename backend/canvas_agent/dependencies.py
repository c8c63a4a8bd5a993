"""FastAPI dependency injection."""

from __future__ import annotations

from functools import lru_cache

from canvas_agent.canvas.store import InMemoryCanvasStore
from canvas_agent.config import Settings, settings
from canvas_agent.engine.executor import PlanExecutor, create_executor
from canvas_agent.engine.registry import ToolRegistry, build_registry


def get_settings() -> Settings:
    return settings


@lru_cache(maxsize=1)
def get_store() -> InMemoryCanvasStore:
    return InMemoryCanvasStore(max_shapes=settings.max_shapes)


def get_registry() -> ToolRegistry:
    return build_registry()


@lru_cache(maxsize=1)
def get_executor() -> PlanExecutor:
    return create_executor()
