"""UI building blocks shared by the templates. All coordinates are top-left."""

from __future__ import annotations

from canvas_agent.canvas.geometry import estimate_text_size
from canvas_agent.models.shapes import ShapeSeed


def rect(x: float, y: float, width: float, height: float, fill: str, **extra) -> ShapeSeed:
    return ShapeSeed(type="rectangle", x=x, y=y, width=width, height=height, fill=fill, **extra)


def label(x: float, y: float, text: str, font_size: float, fill: str) -> ShapeSeed:
    width, height = estimate_text_size(text, font_size)
    return ShapeSeed(type="text", x=x, y=y, width=width, height=height, text=text, font_size=font_size, fill=fill)


def centered_label(x: float, y: float, width: float, text: str, font_size: float, fill: str) -> ShapeSeed:
    """Label horizontally centred inside a span starting at x."""
    text_width, _ = estimate_text_size(text, font_size)
    return label(x + (width - text_width) / 2, y, text, font_size, fill)


def shadow(
    x: float,
    y: float,
    width: float,
    height: float,
    corner_radius: float = 0,
    offset: float = 2,
    opacity: float = 0.08,
) -> ShapeSeed:
    return rect(x, y + offset, width, height, "#1E1E1E", opacity=opacity, corner_radius=corner_radius)


def border(
    x: float,
    y: float,
    width: float,
    height: float,
    corner_radius: float = 0,
    color: str = "#E5E5E5",
    opacity: float = 0.15,
) -> ShapeSeed:
    return rect(x + 1, y + 1, width - 2, height - 2, color, opacity=opacity, corner_radius=corner_radius)


def card(
    x: float,
    y: float,
    width: float,
    height: float,
    corner_radius: float = 12,
    shadow_layers: int = 3,
) -> list[ShapeSeed]:
    """Stacked soft shadows, a white body and a faint border."""
    layers = [
        shadow(x, y + i * 2, width, height, corner_radius, opacity=round(0.08 - i * 0.02, 2))
        for i in range(shadow_layers)
    ]
    layers.append(rect(x, y, width, height, "#FFFFFF", corner_radius=corner_radius))
    layers.append(border(x, y, width, height, corner_radius))
    return layers


def accent_strip(x: float, y: float, height: float, color: str) -> ShapeSeed:
    return rect(x, y, 4, height, color)


def _field_radius(style: str) -> float:
    return 4 if style == "minimal" else 8


def input_field(
    x: float,
    y: float,
    width: float,
    caption: str,
    placeholder: str,
    style: str = "modern",
) -> tuple[list[ShapeSeed], float]:
    """Caption, box, border and placeholder. Returns (shapes, height used)."""
    radius = _field_radius(style)
    box_y = y + 20
    background = "#FFFFFF" if style == "minimal" else "#F8F9FA"
    shapes = [
        label(x, y, caption, 12, "#666666"),
        rect(x, box_y, width, 52, background, corner_radius=radius),
        border(x, box_y, width, 52, radius, opacity=0.3),
        label(x + 16, box_y + 18, placeholder, 15, "#999999"),
    ]
    return shapes, 72


def button(
    x: float,
    y: float,
    width: float,
    text: str,
    color: str = "#0D99FF",
    style: str = "modern",
    with_shadow: bool = True,
) -> tuple[list[ShapeSeed], float]:
    radius = _field_radius(style)
    shapes = []
    if with_shadow:
        shapes.append(shadow(x, y - 2, width, 52, radius, opacity=0.15))
    shapes.append(rect(x, y, width, 52, color, corner_radius=radius))
    shapes.append(centered_label(x, y + 18, width, text, 18, "#FFFFFF"))
    return shapes, 52


def divider(x: float, y: float, width: float, text: str | None = None) -> tuple[list[ShapeSeed], float]:
    shapes = [rect(x, y + 12, width, 1, "#E5E5E5", opacity=0.5)]
    if text:
        shapes.append(centered_label(x, y + 2, width, text, 14, "#666666"))
    return shapes, 40


def social_button(x: float, y: float, width: float, text: str, color: str) -> tuple[list[ShapeSeed], float]:
    shapes = [
        rect(x, y, width, 48, color, corner_radius=8),
        centered_label(x, y + 16, width, text, 16, "#FFFFFF"),
    ]
    return shapes, 60
