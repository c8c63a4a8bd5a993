"""Argument validation against the registered schema for an operation."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ValidationError

from canvas_agent.engine.errors import SchemaViolationError, UnknownOperationError
from canvas_agent.engine.registry import ToolRegistry, get_registry


def field_problems(exc: ValidationError) -> list[tuple[str, str]]:
    """Flatten a pydantic error into (dotted field path, message) pairs."""
    problems = []
    for err in exc.errors(include_url=False):
        path = ".".join(str(part) for part in err["loc"])
        problems.append((path, err["msg"]))
    return problems


def validate(
    operation_name: str,
    arguments: dict[str, Any] | BaseModel,
    registry: ToolRegistry | None = None,
    step: int = 0,
) -> BaseModel:
    """Validate ``arguments`` for ``operation_name`` and return the typed model.

    Passing an already-validated model re-validates its wire form, so the call
    is idempotent. Raises UnknownOperationError or SchemaViolationError.
    """
    registry = registry or get_registry()
    spec = registry.lookup(operation_name)
    if spec is None:
        raise UnknownOperationError(step, operation_name)

    if isinstance(arguments, BaseModel):
        arguments = arguments.model_dump(by_alias=True, exclude_unset=True)
    if not isinstance(arguments, dict):
        raise SchemaViolationError(step, [("", f"arguments must be an object, got {type(arguments).__name__}")])

    declared = arguments.get("tool")
    if declared is not None and declared != operation_name:
        raise SchemaViolationError(
            step, [("tool", f"must repeat the step's tool '{operation_name}' (got '{declared}')")]
        )

    try:
        return spec.args_model.model_validate(arguments)
    except ValidationError as e:
        raise SchemaViolationError(step, field_problems(e)) from e
