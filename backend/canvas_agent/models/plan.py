"""Plan, step and step-result models exchanged with the planner and the executor."""

from __future__ import annotations

import re
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator, model_validator

from canvas_agent.models.base import CamelModel

# Whole-value reference to an earlier step: {{step_2}} or {{step_2.ids}}
REFERENCE_TOKEN = re.compile(r"^\{\{step_(\d+)(\.ids)?\}\}$")


class StepRef(BaseModel):
    """Deferred argument value: the result of an earlier step in the same plan.

    ``select="id"`` takes the step's primary shape id, ``"ids"`` its full id list.
    """

    model_config = ConfigDict(frozen=True)

    step: int = Field(..., ge=1)
    select: Literal["id", "ids"] = "id"

    def token(self) -> str:
        suffix = ".ids" if self.select == "ids" else ""
        return f"{{{{step_{self.step}{suffix}}}}}"


def parse_reference(value: Any) -> StepRef | None:
    """Return a StepRef if ``value`` is exactly a reference, else None.

    Accepts an existing StepRef, a whole-string token, or ``{"$step": N}``
    (optionally with ``"select"``). Strings that merely contain a token are
    ordinary values.
    """
    if isinstance(value, StepRef):
        return value
    if isinstance(value, str):
        match = REFERENCE_TOKEN.match(value)
        if match:
            return StepRef(step=int(match.group(1)), select="ids" if match.group(2) else "id")
        return None
    if isinstance(value, dict) and "$step" in value and set(value) <= {"$step", "select"}:
        return StepRef(step=value["$step"], select=value.get("select", "id"))
    return None


class PlanStep(CamelModel):
    step: int = Field(..., ge=1, description="1-based display number")
    tool: str = Field(..., min_length=1, description="Operation name")
    args: dict[str, Any] = Field(default_factory=dict)
    description: str = ""

    @field_validator("args", mode="after")
    @classmethod
    def _lift_references(cls, args: dict[str, Any]) -> dict[str, Any]:
        # Top level only: no operation takes a reference below it
        lifted = {}
        for key, value in args.items():
            ref = parse_reference(value)
            lifted[key] = ref if ref is not None else value
        return lifted

    @field_serializer("args")
    def _write_references(self, args: dict[str, Any]) -> dict[str, Any]:
        return {k: v.token() if isinstance(v, StepRef) else v for k, v in args.items()}

    def references(self) -> list[tuple[str, StepRef]]:
        return [(k, v) for k, v in self.args.items() if isinstance(v, StepRef)]


class Plan(CamelModel):
    steps: list[PlanStep] = Field(default_factory=list, alias="plan")
    reasoning: str = ""

    @model_validator(mode="after")
    def _check_numbering(self) -> Plan:
        numbers = [s.step for s in self.steps]
        for prev, cur in zip(numbers, numbers[1:]):
            if cur <= prev:
                raise ValueError(f"step numbers must be strictly increasing (got {prev} then {cur})")
        return self


class StepResult(CamelModel):
    """What one executed step produced. Always a list of shape ids (possibly empty)."""

    step: int
    tool: str
    shape_ids: list[str] = Field(default_factory=list)
    message: str = ""

    @property
    def primary_id(self) -> str | None:
        return self.shape_ids[0] if self.shape_ids else None
