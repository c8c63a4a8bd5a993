"""Random shape descriptors kept inside canvas bounds."""

from __future__ import annotations

import math

import numpy as np

from canvas_agent.canvas.constants import CANVAS_HEIGHT, CANVAS_WIDTH, SHAPE_TYPES
from canvas_agent.canvas.geometry import line_box, text_box
from canvas_agent.models.shapes import ShapeSeed

PALETTE = [
    "#FF6B6B", "#4ECDC4", "#45B7D1", "#FFA07A", "#98D8C8",
    "#F7DC6F", "#BB8FCE", "#85C1E2", "#F8B195", "#C06C84",
    "#6C5B7B", "#355C7D", "#F67280", "#C06C84", "#00D9FF",
    "#0D99FF", "#FF0080", "#8B4513", "#2ECC71", "#E74C3C",
]

WORDS = ["Hello", "World", "Test", "Canvas", "Shape", "Design", "Create", "Build", "Draw", "Art"]


def _int(rng: np.random.Generator, low: float, high: float) -> int:
    """Uniform integer in [low, high], inclusive."""
    return int(rng.integers(math.ceil(low), math.floor(high), endpoint=True))


def random_shape(shape_type: str, rng: np.random.Generator) -> ShapeSeed:
    fill = PALETTE[_int(rng, 0, len(PALETTE) - 1)]
    rotation = _int(rng, 0, 360)

    if shape_type == "rectangle":
        width = _int(rng, 50, 300)
        height = _int(rng, 50, 300)
        return ShapeSeed(
            type="rectangle",
            x=_int(rng, 0, CANVAS_WIDTH - width),
            y=_int(rng, 0, CANVAS_HEIGHT - height),
            width=width,
            height=height,
            fill=fill,
            rotation=rotation,
            corner_radius=_int(rng, 0, 20),
        )

    if shape_type == "circle":
        diameter = _int(rng, 25, 150) * 2
        return ShapeSeed(
            type="circle",
            x=_int(rng, 0, CANVAS_WIDTH - diameter),
            y=_int(rng, 0, CANVAS_HEIGHT - diameter),
            width=diameter,
            height=diameter,
            fill=fill,
            rotation=rotation,
        )

    if shape_type == "text":
        font_size = _int(rng, 16, 72)
        text = WORDS[_int(rng, 0, len(WORDS) - 1)]
        # Centre far enough from the edges for the longest word at this size
        half_w = len("Canvas") * font_size * 0.3
        half_h = font_size * 0.6
        cx = _int(rng, half_w, CANVAS_WIDTH - half_w)
        cy = _int(rng, half_h, CANVAS_HEIGHT - half_h)
        return ShapeSeed(
            type="text",
            text=text,
            font_size=font_size,
            fill=fill,
            rotation=rotation,
            **text_box(cx, cy, text, font_size),
        )

    if shape_type == "line":
        coords = [_int(rng, 50, CANVAS_WIDTH - 50) for _ in range(4)]
        return ShapeSeed(
            type="line",
            fill=fill,
            stroke=fill,
            stroke_width=_int(rng, 2, 10),
            rotation=rotation,
            **line_box(*coords),
        )

    raise ValueError(f"Unknown shape type: {shape_type}")


def generate_random_shapes(
    count: int,
    types: list[str] | None = None,
    balanced: bool = True,
    rng: np.random.Generator | None = None,
) -> list[ShapeSeed]:
    """Generate ``count`` random descriptors.

    Balanced mode splits the count evenly across ``types`` (earlier types take
    the remainder); otherwise each shape picks its type at random.
    """
    types = list(types or SHAPE_TYPES)
    if not types:
        raise ValueError("types must be a non-empty list")
    if count <= 0:
        return []
    rng = rng or np.random.default_rng()

    if balanced:
        per_type, remainder = divmod(count, len(types))
        plan = [t for i, t in enumerate(types) for _ in range(per_type + (1 if i < remainder else 0))]
    else:
        plan = [types[_int(rng, 0, len(types) - 1)] for _ in range(count)]

    return [random_shape(t, rng) for t in plan]
