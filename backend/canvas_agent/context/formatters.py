"""Plain-text renderings of canvas objects for planner context."""

from __future__ import annotations

from canvas_agent.models.shapes import CanvasObject

STATE_HEADER = "\n\n**Current Canvas State:** "
OBJECTS_HEADER = "\n\n**Current Canvas Objects:**\n"


def fmt_number(value: float | None) -> str:
    """100.0 -> '100', 12.345 -> '12.35'."""
    if value is None:
        return "none"
    value = round(float(value), 2)
    return str(int(value)) if value.is_integer() else str(value)


def plural(count: int, noun: str) -> str:
    return f"{count} {noun}{'' if count == 1 else 's'}"


def size_detail(shape: CanvasObject) -> str:
    """', radius: r' for circles, ', size: wxh' for anything else with a box."""
    if shape.type == "circle" and shape.width and shape.height:
        return f", radius: {fmt_number(min(shape.width, shape.height) / 2)}"
    if shape.width and shape.height:
        return f", size: {fmt_number(shape.width)}x{fmt_number(shape.height)}"
    return ""


def position_line(index: int, shape: CanvasObject) -> str:
    return f"{index}. {shape.type} (ID: {shape.id}) at ({round(shape.x)}, {round(shape.y)})\n"


def format_canvas_state(shapes: list[CanvasObject], max_shapes: int = 10, include_header: bool = True) -> str:
    """General-purpose summary of the first ``max_shapes`` objects."""
    if not shapes:
        return f"{OBJECTS_HEADER.rstrip()} (empty canvas)\n" if include_header else "(empty canvas)"

    out = OBJECTS_HEADER if include_header else ""
    for index, shape in enumerate(shapes[:max_shapes], start=1):
        details = f"{shape.type} (ID: {shape.id}, fill: {shape.fill or 'none'}{size_detail(shape)}"
        if shape.text:
            details += f', text: "{shape.text}"'
        if shape.font_size:
            details += f", fontSize: {fmt_number(shape.font_size)}"
        out += f"{index}. {details})\n" if include_header else f"- {details})\n"

    if len(shapes) > max_shapes:
        out += f"... and {len(shapes) - max_shapes} more\n"
    return out
