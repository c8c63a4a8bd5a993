"""Tests for the tool registry."""

import pytest

from canvas_agent.engine.context import ActionResult, ExecutionContext
from canvas_agent.engine.registry import ToolRegistry, ToolSpec
from canvas_agent.models.operations import ClearCanvasArgs, DeleteShapeArgs

EXPECTED_TOOLS = {
    "create_rectangle",
    "create_circle",
    "create_text",
    "create_line",
    "update_shape",
    "move_shape",
    "resize_shape",
    "rotate_shape",
    "delete_shape",
    "batch_operations",
    "batch_update_shapes",
    "create_grid",
    "create_row",
    "create_circle_row",
    "clear_canvas",
    "add_random_shapes",
    "use_login_template",
    "use_navbar_template",
    "use_card_template",
}


async def _noop(args, ctx: ExecutionContext) -> ActionResult:
    return ActionResult()


def test_register_and_lookup():
    reg = ToolRegistry()
    spec = ToolSpec(name="clear_canvas", args_model=ClearCanvasArgs, action=_noop)
    reg.register(spec)
    assert reg.lookup("clear_canvas") is spec
    assert reg.lookup("missing") is None
    assert "clear_canvas" in reg
    assert reg.count == 1


def test_duplicate_name_rejected():
    reg = ToolRegistry()
    reg.register(ToolSpec(name="delete_shape", args_model=DeleteShapeArgs, action=_noop))
    with pytest.raises(ValueError, match="Duplicate"):
        reg.register(ToolSpec(name="delete_shape", args_model=DeleteShapeArgs, action=_noop))


def test_frozen_registry_is_read_only():
    reg = ToolRegistry()
    reg.register(ToolSpec(name="clear_canvas", args_model=ClearCanvasArgs, action=_noop))
    reg.freeze()
    assert reg.frozen
    with pytest.raises(RuntimeError):
        reg.register(ToolSpec(name="delete_shape", args_model=DeleteShapeArgs, action=_noop))


def test_app_registry_has_every_tool(registry):
    assert set(registry.names()) == EXPECTED_TOOLS
    assert registry.frozen


def test_definitions_carry_schemas(registry):
    by_name = {d["name"]: d for d in registry.definitions()}
    circle = by_name["create_circle"]
    assert circle["description"]
    assert "radius" in circle["parameters"]["properties"]
    assert "shapeId" in by_name["update_shape"]["parameters"]["properties"]
