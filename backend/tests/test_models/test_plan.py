"""Tests for plan parsing and step references."""

import pytest
from pydantic import ValidationError

from canvas_agent.models.plan import Plan, PlanStep, StepRef, StepResult, parse_reference


def test_parse_reference_forms():
    assert parse_reference("{{step_1}}") == StepRef(step=1)
    assert parse_reference("{{step_3.ids}}") == StepRef(step=3, select="ids")
    assert parse_reference({"$step": 2}) == StepRef(step=2)
    assert parse_reference({"$step": 2, "select": "ids"}) == StepRef(step=2, select="ids")


def test_embedded_token_is_plain_text():
    assert parse_reference("see {{step_1}} above") is None
    assert parse_reference("#FF0000") is None
    assert parse_reference({"type": "circle"}) is None


def test_plan_step_lifts_references():
    step = PlanStep(step=2, tool="update_shape", args={"tool": "update_shape", "shapeId": "{{step_1}}", "fill": "#000"})
    assert step.references() == [("shapeId", StepRef(step=1))]
    assert step.model_dump()["args"]["shapeId"] == "{{step_1}}"


def test_plan_uses_plan_key_on_the_wire():
    plan = Plan.model_validate({"plan": [{"step": 1, "tool": "clear_canvas", "args": {"tool": "clear_canvas"}}], "reasoning": "ok"})
    assert len(plan.steps) == 1
    assert plan.model_dump(by_alias=True)["plan"][0]["tool"] == "clear_canvas"


def test_empty_plan_is_valid():
    assert Plan.model_validate({"plan": [], "reasoning": "It has a radius of 100."}).steps == []


def test_step_numbers_must_increase():
    with pytest.raises(ValidationError, match="strictly increasing"):
        Plan.model_validate({"plan": [{"step": 2, "tool": "a"}, {"step": 1, "tool": "b"}]})


def test_step_result_primary_id():
    assert StepResult(step=1, tool="create_grid", shape_ids=["a", "b"]).primary_id == "a"
    assert StepResult(step=1, tool="clear_canvas").primary_id is None
