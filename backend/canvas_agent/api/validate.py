"""POST /api/validate -- check one operation's arguments without executing it."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from canvas_agent.dependencies import get_registry
from canvas_agent.engine.errors import SchemaViolationError, UnknownOperationError
from canvas_agent.engine.registry import ToolRegistry
from canvas_agent.engine.validation import validate
from canvas_agent.models.requests import ValidateRequest
from canvas_agent.models.responses import FieldError, ValidateResponse

router = APIRouter()


@router.post("/validate", response_model=ValidateResponse)
async def validate_operation(req: ValidateRequest, registry: ToolRegistry = Depends(get_registry)) -> ValidateResponse:
    try:
        validated = validate(req.tool, req.args, registry)
    except UnknownOperationError as e:
        return ValidateResponse(valid=False, tool=req.tool, errors=[FieldError(field_path="tool", message=e.cause)])
    except SchemaViolationError as e:
        errors = [FieldError(field_path=path, message=msg) for path, msg in e.problems]
        return ValidateResponse(valid=False, tool=req.tool, errors=errors)

    return ValidateResponse(
        valid=True,
        tool=req.tool,
        args=validated.model_dump(mode="json", by_alias=True, exclude_unset=True),
    )
