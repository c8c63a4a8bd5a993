"""Plan execution core: tool registry, argument validation, step references, executor."""

from canvas_agent.engine.context import ActionResult, ExecutionContext
from canvas_agent.engine.errors import (
    ActionFailedError,
    PlanError,
    SchemaViolationError,
    UnknownOperationError,
    UnresolvedReferenceError,
)
from canvas_agent.engine.executor import PlanExecutor, create_executor
from canvas_agent.engine.registry import ToolRegistry, ToolSpec, build_registry, get_registry, tool

__all__ = [
    "ActionResult",
    "ExecutionContext",
    "PlanError",
    "UnknownOperationError",
    "UnresolvedReferenceError",
    "SchemaViolationError",
    "ActionFailedError",
    "PlanExecutor",
    "create_executor",
    "ToolRegistry",
    "ToolSpec",
    "build_registry",
    "get_registry",
    "tool",
]
