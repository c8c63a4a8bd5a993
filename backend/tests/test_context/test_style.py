"""Tests for style inference from a user's shapes."""

from canvas_agent.context.style import infer_style
from tests.conftest import make_shape


def test_too_few_shapes():
    assert infer_style([make_shape("a"), make_shape("b")]) is None


def test_profile_from_shapes():
    shapes = [
        make_shape("a", fill="#FF0000", x=100, y=100, width=100, height=50),
        make_shape("b", fill="#FF0000", x=150, y=100, width=200, height=50),
        make_shape("c", fill="#00FF00", x=200, y=100, width=300, height=50),
        make_shape("t", "text", fill="#000000", x=250, y=100, width=60, height=50, text="Hi", font_size=24),
    ]
    style = infer_style(shapes)
    assert style.top_colors == ["#FF0000", "#00FF00", "#000000"]
    assert style.primary_color == "#FF0000"
    assert style.avg_spacing == 50
    assert style.avg_width == 165
    assert style.avg_height == 50
    assert style.preferred_font_size == 24
    assert "#FF0000" in style.to_prompt()
