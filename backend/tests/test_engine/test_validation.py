"""Tests for argument validation against registered schemas."""

import pytest

from canvas_agent.engine.errors import SchemaViolationError, UnknownOperationError
from canvas_agent.engine.validation import validate
from canvas_agent.models.operations import MoveShapeArgs


def test_valid_arguments_return_typed_model(registry):
    args = validate("move_shape", {"tool": "move_shape", "shapeId": "s1", "x": 10}, registry)
    assert isinstance(args, MoveShapeArgs)
    assert args.x == 10
    assert args.y is None


def test_unknown_operation(registry):
    with pytest.raises(UnknownOperationError, match="Unknown tool: explode"):
        validate("explode", {"tool": "explode"}, registry, step=3)


def test_tool_must_match_operation(registry):
    with pytest.raises(SchemaViolationError) as exc:
        validate("move_shape", {"tool": "rotate_shape", "shapeId": "s1"}, registry)
    assert exc.value.field_paths == ["tool"]


def test_missing_discriminator(registry):
    with pytest.raises(SchemaViolationError) as exc:
        validate("delete_shape", {"shapeId": "s1"}, registry)
    assert "tool" in exc.value.field_paths


def test_error_names_step_and_field(registry):
    with pytest.raises(SchemaViolationError) as exc:
        validate("update_shape", {"tool": "update_shape", "shapeId": "s1", "opacity": 3}, registry, step=2)
    err = exc.value
    assert err.step == 2
    assert str(err).startswith("Step 2 failed:")
    assert err.field_paths == ["opacity"]
    assert err.to_dict()["fieldPath"] == ["opacity"]


def test_non_object_arguments(registry):
    with pytest.raises(SchemaViolationError, match="must be an object"):
        validate("delete_shape", ["s1"], registry)


def test_validate_twice_is_stable(registry):
    raw = {"tool": "update_shape", "shapeId": "s1", "fill": None, "text": None, "width": 50}
    once = validate("update_shape", raw, registry)
    twice = validate("update_shape", once, registry)
    assert twice == once
    assert twice.changes() == {"fill": None, "width": 50}
