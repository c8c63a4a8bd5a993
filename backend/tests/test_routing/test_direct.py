"""Tests for one-step plans built from direct commands."""

import pytest

from canvas_agent.routing import heuristics as h
from canvas_agent.routing.direct import DEFAULT_FILL, direct_plan

IDS = ["a", "b"]


def only_step(plan):
    assert len(plan.steps) == 1
    return plan.steps[0]


def test_clear():
    step = only_step(direct_plan("clear", h.DIRECT_CLEAR, []))
    assert step.tool == "clear_canvas"
    assert step.args == {"tool": "clear_canvas"}


@pytest.mark.parametrize(
    "command, delta",
    [
        ("move everything up", {"deltaY": -100}),
        ("move right by 200", {"deltaX": 200}),
        ("move all left 25", {"deltaX": -25}),
        ("shift down", {"deltaY": 100}),
    ],
)
def test_move_all(command, delta):
    step = only_step(direct_plan(command, h.DIRECT_MOVE_ALL, IDS))
    assert step.tool == "batch_update_shapes"
    assert step.args == {"tool": "batch_update_shapes", "shapeIds": IDS, **delta}


def test_rotate_wraps_angle():
    step = only_step(direct_plan("rotate everything 45", h.DIRECT_ROTATE_ALL, IDS))
    assert step.args["deltaRotation"] == 45
    step = only_step(direct_plan("rotate all 450", h.DIRECT_ROTATE_ALL, IDS))
    assert step.args["deltaRotation"] == 90


@pytest.mark.parametrize(
    "command, factor",
    [
        ("make everything twice as big", 2.0),
        ("triple all", 3.0),
        ("halve everything", 0.5),
        ("make all smaller", 0.5),
        ("scale all 1.5x", 1.5),
        ("make everything bigger", 2.0),
    ],
)
def test_scale_all(command, factor):
    step = only_step(direct_plan(command, h.DIRECT_SCALE_ALL, IDS))
    assert step.args["scaleX"] == factor
    assert step.args["scaleY"] == factor


def test_create_coloured_circle():
    plan = direct_plan("create a red circle", h.DIRECT_CREATE_SHAPE, [])
    step = only_step(plan)
    assert step.tool == "create_circle"
    assert step.args == {"tool": "create_circle", "x": 2500, "y": 2500, "radius": 50, "fill": "#FF0000"}
    assert plan.reasoning == "Done! I've created a red circle."


def test_create_defaults():
    square = only_step(direct_plan("add a square", h.DIRECT_CREATE_SHAPE, []))
    assert (square.args["width"], square.args["height"], square.args["fill"]) == (100, 100, DEFAULT_FILL)

    line = only_step(direct_plan("draw a line", h.DIRECT_CREATE_SHAPE, []))
    assert line.tool == "create_line"
    assert (line.args["x1"], line.args["x2"], line.args["stroke"]) == (2450, 2550, DEFAULT_FILL)

    text = only_step(direct_plan("create text", h.DIRECT_CREATE_SHAPE, []))
    assert text.args["text"] == "Text"
    assert text.args["fontSize"] == 48


@pytest.mark.parametrize(
    "command, kind",
    [
        ("move everything up", h.DIRECT_MOVE_ALL),
        ("rotate all 90", h.DIRECT_ROTATE_ALL),
        ("double everything", h.DIRECT_SCALE_ALL),
    ],
)
def test_transforms_on_empty_canvas(command, kind):
    assert direct_plan(command, kind, []) is None


def test_unknown_kind():
    with pytest.raises(ValueError):
        direct_plan("whatever", "direct_teleport", IDS)
