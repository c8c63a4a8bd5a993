"""Leaf-node geometry helpers for canvas shapes. No engine imports.

Storage always keeps shapes as a top-left box (x, y, width, height). The planner
reasons in centre coordinates for rectangles, circles and text, and in endpoints
for lines, so every create path goes through one of the converters below.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

from shapely.geometry import box
from shapely.geometry.base import BaseGeometry

from canvas_agent.canvas.constants import (
    CANVAS_CENTER_X,
    CANVAS_CENTER_Y,
    CANVAS_HEIGHT,
    CANVAS_WIDTH,
    DEFAULT_FONT_SIZE,
    TEXT_HEIGHT_MULTIPLIER,
    TEXT_WIDTH_PER_CHAR,
)

if TYPE_CHECKING:
    from canvas_agent.models.shapes import CanvasObject

Viewport = tuple[float, float, float, float]


def center_to_top_left(cx: float, cy: float, width: float, height: float) -> tuple[float, float]:
    return (cx - width / 2, cy - height / 2)


def top_left_to_center(x: float, y: float, width: float, height: float) -> tuple[float, float]:
    return (x + width / 2, y + height / 2)


def estimate_text_size(text: str, font_size: float = DEFAULT_FONT_SIZE) -> tuple[float, float]:
    """Approximate rendered (width, height) of a single text line."""
    return (len(text) * font_size * TEXT_WIDTH_PER_CHAR, font_size * TEXT_HEIGHT_MULTIPLIER)


def circle_box(cx: float, cy: float, radius: float) -> dict[str, float]:
    diameter = radius * 2
    x, y = center_to_top_left(cx, cy, diameter, diameter)
    return {"x": x, "y": y, "width": diameter, "height": diameter}


def rect_box(cx: float, cy: float, width: float, height: float) -> dict[str, float]:
    x, y = center_to_top_left(cx, cy, width, height)
    return {"x": x, "y": y, "width": width, "height": height}


def text_box(cx: float, cy: float, text: str, font_size: float = DEFAULT_FONT_SIZE) -> dict[str, float]:
    width, height = estimate_text_size(text, font_size)
    x, y = center_to_top_left(cx, cy, width, height)
    return {"x": x, "y": y, "width": width, "height": height}


def line_box(x1: float, y1: float, x2: float, y2: float) -> dict:
    """Bounding box of a segment plus its endpoint list."""
    return {
        "x": min(x1, x2),
        "y": min(y1, y2),
        "width": abs(x2 - x1),
        "height": abs(y2 - y1),
        "points": [x1, y1, x2, y2],
    }


def shape_bounds(shape: "CanvasObject") -> BaseGeometry:
    """Axis-aligned bounds of a stored shape as a shapely box."""
    if shape.type == "line" and shape.points and len(shape.points) >= 4:
        xs = shape.points[0::2]
        ys = shape.points[1::2]
        return box(min(xs), min(ys), max(xs), max(ys))
    width = shape.width or 0.0
    height = shape.height or 0.0
    return box(shape.x, shape.y, shape.x + width, shape.y + height)


def has_collision(
    x: float,
    y: float,
    width: float,
    height: float,
    shapes: Iterable["CanvasObject"],
    padding: float = 50,
) -> bool:
    """True when the padded box overlaps any shape (edges touching do not count)."""
    candidate = box(x - padding, y - padding, x + width + padding, y + height + padding)
    for shape in shapes:
        if candidate.intersection(shape_bounds(shape)).area > 0:
            return True
    return False


def within_canvas(x: float, y: float, width: float, height: float) -> bool:
    return x >= 0 and y >= 0 and x + width <= CANVAS_WIDTH and y + height <= CANVAS_HEIGHT


def find_empty_space(
    width: float,
    height: float,
    preferred: tuple[float, float],
    shapes: list["CanvasObject"],
    step: float = 100,
    max_radius: float = 1000,
    padding: float = 50,
) -> tuple[float, float] | None:
    """Spiral outwards from ``preferred`` (top-left) looking for a free slot.

    Tries the preferred point, then the eight compass neighbours at each radius.
    Returns None when nothing within ``max_radius`` is free.
    """
    px, py = preferred
    if within_canvas(px, py, width, height) and not has_collision(px, py, width, height, shapes, padding):
        return (px, py)

    radius = step
    while radius <= max_radius:
        candidates = [
            (px, py - radius),
            (px + radius, py - radius),
            (px + radius, py),
            (px + radius, py + radius),
            (px, py + radius),
            (px - radius, py + radius),
            (px - radius, py),
            (px - radius, py - radius),
        ]
        for cx, cy in candidates:
            if not within_canvas(cx, cy, width, height):
                continue
            if not has_collision(cx, cy, width, height, shapes, padding):
                return (cx, cy)
        radius += step

    return None


def _in_viewport(x: float, y: float, viewport: Viewport) -> bool:
    vx, vy, vw, vh = viewport
    return vx <= x <= vx + vw and vy <= y <= vy + vh


def optimal_position(
    width: float,
    height: float,
    shapes: list["CanvasObject"],
    viewport: Viewport | None = None,
) -> tuple[float, float]:
    """Top-left placement for a multi-shape layout of the given size.

    Priority: canvas centre when visible and free, then the viewport centre,
    then the nearest empty slot around whichever centre applies. Falls back to
    the canvas centre (possibly overlapping) when the canvas is crowded.
    """
    centre = center_to_top_left(CANVAS_CENTER_X, CANVAS_CENTER_Y, width, height)
    centre_visible = viewport is None or _in_viewport(CANVAS_CENTER_X, CANVAS_CENTER_Y, viewport)

    if centre_visible and not has_collision(*centre, width, height, shapes):
        return centre

    if viewport is not None and not centre_visible:
        vx, vy = top_left_to_center(*viewport)
        x, y = center_to_top_left(vx, vy, width, height)
        x = max(0.0, min(CANVAS_WIDTH - width, x))
        y = max(0.0, min(CANVAS_HEIGHT - height, y))
        if not has_collision(x, y, width, height, shapes):
            return (x, y)

    if viewport is not None:
        sx, sy = top_left_to_center(*viewport)
    else:
        sx, sy = CANVAS_CENTER_X, CANVAS_CENTER_Y

    found = find_empty_space(width, height, center_to_top_left(sx, sy, width, height), shapes)
    return found if found is not None else centre


# ---------------------------------------------------------------------------
# Change sets for moving and resizing stored shapes
# ---------------------------------------------------------------------------

def translate_changes(shape: "CanvasObject", dx: float, dy: float) -> dict:
    changes: dict = {"x": shape.x + dx, "y": shape.y + dy}
    if shape.points:
        changes["points"] = [
            p + (dx if i % 2 == 0 else dy) for i, p in enumerate(shape.points)
        ]
    return changes


def move_changes(shape: "CanvasObject", x: float | None, y: float | None) -> dict:
    """Changes that put the shape's top-left at (x, y); None keeps that axis."""
    dx = 0.0 if x is None else x - shape.x
    dy = 0.0 if y is None else y - shape.y
    return translate_changes(shape, dx, dy)


def _rescale_points(points: list[float], ox: float, oy: float, sx: float, sy: float) -> list[float]:
    return [
        ox + (p - ox) * sx if i % 2 == 0 else oy + (p - oy) * sy
        for i, p in enumerate(points)
    ]


def resize_changes(shape: "CanvasObject", width: float | None, height: float | None) -> dict:
    """Changes that give the shape a new box size, anchored at its top-left.

    Circles stay round: the first given dimension becomes the diameter.
    """
    if shape.type == "circle":
        diameter = width if width is not None else height
        if diameter is None:
            return {}
        return {"width": diameter, "height": diameter}

    changes: dict = {}
    if width is not None:
        changes["width"] = width
    if height is not None:
        changes["height"] = height
    if shape.type == "line" and shape.points and changes:
        sx = (width / shape.width) if width is not None and shape.width else 1.0
        sy = (height / shape.height) if height is not None and shape.height else 1.0
        changes["points"] = _rescale_points(shape.points, shape.x, shape.y, sx, sy)
    return changes


def scale_changes(shape: "CanvasObject", sx: float, sy: float) -> dict:
    """Changes that scale the shape about its own centre.

    Circles scale uniformly; text scales its font size by ``sy`` and
    re-estimates its box.
    """
    width = shape.width or 0.0
    height = shape.height or 0.0
    cx, cy = top_left_to_center(shape.x, shape.y, width, height)

    if shape.type == "circle":
        factor = sx if sx != 1 else sy
        return rect_box(cx, cy, width * factor, height * factor)

    if shape.type == "text" and shape.text is not None:
        font_size = (shape.font_size or DEFAULT_FONT_SIZE) * sy
        return {"font_size": font_size, **text_box(cx, cy, shape.text, font_size)}

    changes: dict = rect_box(cx, cy, width * sx, height * sy)
    if shape.type == "line" and shape.points:
        changes["points"] = _rescale_points(shape.points, cx, cy, sx, sy)
    return changes
