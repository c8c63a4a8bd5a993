"""Tests for coordinate conversion, bounds and free-space search."""

from canvas_agent.canvas.geometry import (
    circle_box,
    estimate_text_size,
    find_empty_space,
    has_collision,
    line_box,
    move_changes,
    optimal_position,
    resize_changes,
    scale_changes,
    shape_bounds,
    text_box,
)
from tests.conftest import make_shape


def test_circle_box_is_square_around_centre():
    assert circle_box(500, 500, 50) == {"x": 450, "y": 450, "width": 100, "height": 100}


def test_text_size_estimate():
    width, height = estimate_text_size("Hello", 48)
    assert width == 5 * 48 * 0.6
    assert height == 48 * 1.2


def test_text_box_centred():
    box = text_box(1000, 1000, "Hi", 50)
    assert box["width"] == 60
    assert box["x"] == 970
    assert box["y"] == 970


def test_line_box_keeps_points():
    box = line_box(400, 300, 100, 500)
    assert (box["x"], box["y"], box["width"], box["height"]) == (100, 300, 300, 200)
    assert box["points"] == [400, 300, 100, 500]


def test_line_bounds_use_points():
    line = make_shape("l", "line", x=0, y=0, width=0, height=0, points=[10, 20, 110, 220])
    assert shape_bounds(line).bounds == (10, 20, 110, 220)


def test_collision_with_padding():
    shapes = [make_shape("a", x=1000, y=1000, width=100, height=100)]
    assert has_collision(1120, 1000, 50, 50, shapes, padding=50)
    assert not has_collision(1200, 1000, 50, 50, shapes, padding=50)


def test_find_empty_space_prefers_requested_point():
    assert find_empty_space(100, 100, (2000, 2000), []) == (2000, 2000)


def test_find_empty_space_moves_off_occupied_point():
    shapes = [make_shape("a", x=2000, y=2000, width=100, height=100)]
    found = find_empty_space(100, 100, (2000, 2000), shapes)
    assert found is not None
    assert found != (2000, 2000)
    assert not has_collision(*found, 100, 100, shapes)


def test_optimal_position_uses_canvas_centre_when_free():
    assert optimal_position(400, 200, []) == (2300, 2400)


def test_move_changes_shifts_line_points():
    line = make_shape("l", "line", x=100, y=100, width=100, height=0, points=[100, 100, 200, 100])
    changes = move_changes(line, 300, None)
    assert changes["x"] == 300
    assert changes["y"] == 100
    assert changes["points"] == [300, 100, 400, 100]


def test_resize_keeps_circle_round():
    circle = make_shape("c", "circle", width=100, height=100)
    assert resize_changes(circle, 40, 80) == {"width": 40, "height": 40}


def test_scale_about_centre():
    rect = make_shape("r", x=100, y=100, width=100, height=50)
    changes = scale_changes(rect, 2, 2)
    assert changes == {"x": 50, "y": 75, "width": 200, "height": 100}


def test_scale_text_scales_font():
    text = make_shape("t", "text", text="Hi", font_size=20, x=100, y=100, width=24, height=24)
    changes = scale_changes(text, 2, 2)
    assert changes["font_size"] == 40
    assert changes["width"] == 48
