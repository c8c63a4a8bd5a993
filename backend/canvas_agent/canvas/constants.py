"""Canvas extents, shape limits and default shape properties."""

from __future__ import annotations

CANVAS_WIDTH = 5000
CANVAS_HEIGHT = 5000
CANVAS_CENTER_X = CANVAS_WIDTH // 2
CANVAS_CENTER_Y = CANVAS_HEIGHT // 2

MAX_SHAPES = 1000

SHAPE_TYPES = ("rectangle", "circle", "text", "line")

# Attributes that fall back to these when reset via an explicit null
DEFAULT_SHAPE_PROPS: dict[str, object] = {
    "fill": "#cccccc",
    "stroke": "#cccccc",
    "stroke_width": 2,
    "opacity": 0.8,
    "rotation": 0,
}

DEFAULT_FONT_SIZE = 48
TEXT_WIDTH_PER_CHAR = 0.6
TEXT_HEIGHT_MULTIPLIER = 1.2

# Viewport assumed when the caller has none (centred on the canvas)
DEFAULT_VIEWPORT = (
    CANVAS_CENTER_X - 400,
    CANVAS_CENTER_Y - 300,
    800,
    600,
)
