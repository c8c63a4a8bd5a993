"""Tests for step reference resolution."""

import pytest

from canvas_agent.engine.errors import UnresolvedReferenceError
from canvas_agent.engine.resolver import check_references, resolve
from canvas_agent.models.plan import Plan, StepResult

PRIOR = [
    StepResult(step=1, tool="create_circle", shape_ids=["circle_1"]),
    StepResult(step=2, tool="create_grid", shape_ids=["g1", "g2", "g3"]),
    StepResult(step=3, tool="clear_canvas"),
]


def test_resolves_primary_id():
    assert resolve({"shapeId": "{{step_1}}", "fill": "#000"}, PRIOR, 4) == {"shapeId": "circle_1", "fill": "#000"}


def test_resolves_id_list():
    assert resolve({"shapeIds": "{{step_2.ids}}"}, PRIOR, 4)["shapeIds"] == ["g1", "g2", "g3"]


def test_object_reference_form():
    assert resolve({"shapeId": {"$step": 2}}, PRIOR, 4)["shapeId"] == "g1"


def test_plain_values_untouched():
    args = {"text": "{{step_1}} is a circle", "x": 5}
    assert resolve(args, PRIOR, 4) == args


def test_forward_reference():
    with pytest.raises(UnresolvedReferenceError, match="not yet executed"):
        resolve({"shapeId": "{{step_4}}"}, PRIOR, 2)


def test_self_reference():
    with pytest.raises(UnresolvedReferenceError):
        resolve({"shapeId": "{{step_2}}"}, PRIOR[:1], 2)


def test_step_without_ids():
    with pytest.raises(UnresolvedReferenceError, match="produced no shape id"):
        resolve({"shapeId": "{{step_3}}"}, PRIOR, 4)


def test_preflight_rejects_forward_reference():
    plan = Plan.model_validate(
        {
            "plan": [
                {"step": 1, "tool": "update_shape", "args": {"tool": "update_shape", "shapeId": "{{step_2}}"}},
                {"step": 2, "tool": "create_circle", "args": {"tool": "create_circle", "x": 1, "y": 1, "radius": 5}},
            ]
        }
    )
    with pytest.raises(UnresolvedReferenceError) as exc:
        check_references(plan)
    assert exc.value.step == 1
    assert exc.value.token == "{{step_2}}"
