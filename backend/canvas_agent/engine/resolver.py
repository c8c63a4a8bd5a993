"""Step reference resolution: swap StepRef values for ids produced by earlier steps."""

from __future__ import annotations

from typing import Any

from canvas_agent.engine.errors import UnresolvedReferenceError
from canvas_agent.models.plan import Plan, StepRef, StepResult, parse_reference


def _check_backward(ref: StepRef, ordinal: int) -> None:
    if ref.step >= ordinal:
        raise UnresolvedReferenceError(ordinal, ref.token(), "step not yet executed")


def check_references(plan: Plan) -> None:
    """Reject any reference that does not point strictly backwards.

    Runs before the first step so a bad reference anywhere in the plan fails
    without touching the canvas.
    """
    for ordinal, step in enumerate(plan.steps, start=1):
        for _, ref in step.references():
            _check_backward(ref, ordinal)


def resolve(args: dict[str, Any], prior: list[StepResult], ordinal: int) -> dict[str, Any]:
    """Return a copy of ``args`` with every top-level reference replaced.

    ``prior[n - 1]`` is the result of the n-th step of this run. Nested values
    are left untouched.
    """
    resolved = {}
    for key, value in args.items():
        ref = parse_reference(value)
        if ref is None:
            resolved[key] = value
            continue

        _check_backward(ref, ordinal)
        if ref.step > len(prior):
            raise UnresolvedReferenceError(ordinal, ref.token(), "step not yet executed")

        result = prior[ref.step - 1]
        if ref.select == "ids":
            resolved[key] = list(result.shape_ids)
        elif result.primary_id is None:
            raise UnresolvedReferenceError(ordinal, ref.token(), f"step {ref.step} produced no shape id")
        else:
            resolved[key] = result.primary_id
    return resolved
