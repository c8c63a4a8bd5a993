"""Tests for instruction-aware context minimization."""

import pytest

from canvas_agent.context.formatters import format_canvas_state
from canvas_agent.context.minimizer import Intent, build_context, classify
from tests.conftest import MIXED_SHAPES, make_shapes

HEADER = "\n\n**Current Canvas State:** "


@pytest.mark.parametrize(
    "instruction,intent",
    [
        ("Create a circle", Intent.CREATE),
        ("add 5 random shapes", Intent.CREATE),
        ("clear the canvas", Intent.CLEAR),
        ("delete all shapes", Intent.CLEAR),
        ("delete the red circle", Intent.DELETE),
        ("move the blue rectangle left", Intent.MOVE),
        ("make the circle bigger", Intent.UPDATE),
        ("rotate everything 45 degrees", Intent.UPDATE),
        ("How many circles are there?", Intent.COUNT),
        ("what is on the canvas?", Intent.GENERAL),
    ],
)
def test_classify(instruction, intent):
    assert classify(instruction) is intent


def test_create_on_large_canvas_is_count_only():
    context = build_context("create a circle", make_shapes(500))
    assert context == HEADER + "500 existing shapes\n"
    assert "shape_0" not in context


def test_clear_reports_count():
    assert build_context("clear the canvas", MIXED_SHAPES) == HEADER + "5 shapes will be cleared\n"


def test_count_query_groups_by_type_without_ids():
    context = build_context("how many circles are there?", MIXED_SHAPES)
    assert context == HEADER + "Total: 5 shapes\n- 2 circles\n- 1 rectangle\n- 1 text\n- 1 line\n"
    assert "ID:" not in context


def test_delete_filters_by_color_and_type():
    context = build_context("delete the red circle", MIXED_SHAPES)
    assert context == HEADER + "Matching shapes (1 of 5):\n1. circle (ID: c_red, fill: #FF0000)\n"


def test_delete_color_match_is_case_insensitive():
    context = build_context("remove the blue shapes", MIXED_SHAPES)
    assert "c_blue" in context
    assert "r_blue" in context
    assert "c_red" not in context


def test_delete_without_match():
    assert build_context("delete the purple square", MIXED_SHAPES) == HEADER + "No matching shapes found (total: 5)\n"


def test_move_all_lists_positions():
    context = build_context("move everything up", MIXED_SHAPES)
    assert context.startswith(HEADER + "All shapes (5):\n")
    assert "1. circle (ID: c_red) at (400, 400)\n" in context


def test_move_all_is_bounded():
    context = build_context("move all shapes right", make_shapes(30))
    assert context.count(" at (") == 20
    assert context.endswith("... and 10 more\n")


def test_move_falls_back_to_recent_shapes():
    context = build_context("move the purple circle left", make_shapes(8))
    assert context.startswith(HEADER + "Recent shapes:\n")
    assert context.count(" at (") == 5


def test_rotate_all_emits_ids_only():
    shapes = make_shapes(10)
    context = build_context("rotate everything 45 degrees", shapes)
    assert context == HEADER + "10 shapes: [" + ", ".join(s.id for s in shapes) + "]\n"


def test_relative_transform_keeps_details():
    context = build_context("scale all shapes by 50% based on their size", make_shapes(10))
    assert context.startswith(HEADER + "All shapes (10):\n")


def test_update_all_shows_only_implicated_property():
    context = build_context("make all shapes bigger", MIXED_SHAPES)
    assert "1. circle (ID: c_red, radius: 50)\n" in context
    assert "3. rectangle (ID: r_blue, size: 200x80)\n" in context
    assert "fill:" not in context


def test_update_targets_named_color():
    context = build_context("change the blue circle to red", MIXED_SHAPES)
    assert context == HEADER + "Matching shapes:\n1. circle (ID: c_blue, fill: #0000FF)\n"


def test_general_query_uses_bounded_summary():
    context = build_context("what colors do I have?", MIXED_SHAPES)
    assert context.startswith("\n\n**Current Canvas Objects:**\n")
    assert "1. circle (ID: c_red, fill: #FF0000, radius: 50)\n" in context
    assert '4. text (ID: t_hello, fill: #000000, size: 72x28.8, text: "Hello", fontSize: 24)\n' in context


def test_general_query_on_large_canvas():
    context = build_context("describe the canvas", make_shapes(25))
    assert context.count("(ID: ") == 10
    assert context.endswith("... and 15 more\n")


def test_without_header():
    assert build_context("clear", MIXED_SHAPES, include_header=False) == "5 shapes will be cleared\n"
    assert format_canvas_state(MIXED_SHAPES[:1], include_header=False).startswith("- circle (ID: c_red")


def test_empty_canvas():
    assert format_canvas_state([]) == "\n\n**Current Canvas Objects:** (empty canvas)\n"
    assert build_context("create a circle", []) == HEADER + "0 existing shapes\n"
    assert build_context("", []) == "\n\n**Current Canvas Objects:** (empty canvas)\n"


def test_words_containing_all_do_not_mean_everything():
    context = build_context("make the red circle smaller", MIXED_SHAPES)
    assert context == HEADER + "Matching shapes:\n1. circle (ID: c_red, radius: 50)\n"
