"""One-step plans for heuristic commands, built without the planner."""

from __future__ import annotations

from canvas_agent.canvas.constants import CANVAS_CENTER_X, CANVAS_CENTER_Y
from canvas_agent.models.plan import Plan, PlanStep
from canvas_agent.routing import heuristics as h

DEFAULT_MOVE_DISTANCE = 100
DEFAULT_FILL = "#3B82F6"

COLOR_NAMES = {
    "red": "#FF0000",
    "green": "#00FF00",
    "blue": "#0000FF",
    "yellow": "#FFFF00",
    "orange": "#FFA500",
    "purple": "#800080",
    "pink": "#FFC0CB",
    "black": "#000000",
    "white": "#FFFFFF",
}


def _single(tool: str, args: dict, description: str, reasoning: str) -> Plan:
    step = PlanStep(step=1, tool=tool, args={"tool": tool, **args}, description=description)
    return Plan(plan=[step], reasoning=reasoning)


def _scale_factor(cmd: str) -> tuple[float, str]:
    match = h.SCALE_ALL_LONG.match(cmd)
    if match and match.group("times"):
        factor = float(match.group("times"))
        return factor, f"{factor:g} times as big"
    if "double" in cmd or "twice" in cmd:
        return 2.0, "twice as big"
    if "triple" in cmd:
        return 3.0, "three times as big"
    if "half" in cmd or "halve" in cmd or "smaller" in cmd:
        return 0.5, "half the size"
    return 2.0, "bigger"


def _create_shape(cmd: str) -> Plan:
    match = h.CREATE_SHAPE.match(cmd)
    color, shape = match.group("color"), match.group("shape")
    fill = COLOR_NAMES[color] if color else DEFAULT_FILL
    label = f"{color} {shape}" if color else shape
    cx, cy = CANVAS_CENTER_X, CANVAS_CENTER_Y

    if shape == "circle":
        tool, args = "create_circle", {"x": cx, "y": cy, "radius": 50, "fill": fill}
    elif shape in ("rectangle", "square"):
        width, height = (100, 100) if shape == "square" else (150, 100)
        tool, args = "create_rectangle", {"x": cx, "y": cy, "width": width, "height": height, "fill": fill}
    elif shape == "text":
        tool, args = "create_text", {"x": cx, "y": cy, "text": "Text", "fontSize": 48, "fill": fill}
    else:
        tool = "create_line"
        args = {"x1": cx - 50, "y1": cy, "x2": cx + 50, "y2": cy, "stroke": fill, "strokeWidth": 2}

    return _single(tool, args, f"Create {label}", f"Done! I've created a {label}.")


def direct_plan(command: str, kind: str, shape_ids: list[str]) -> Plan | None:
    """Plan for a command already classified by ``check_heuristic``.

    Whole-canvas transforms target ``shape_ids``; with an empty canvas they
    have nothing to do and None is returned.
    """
    cmd = h.normalize(command)

    if kind == h.DIRECT_CLEAR:
        return _single("clear_canvas", {}, "Clear all shapes", "Done! I've cleared the canvas.")

    if kind == h.DIRECT_CREATE_SHAPE:
        return _create_shape(cmd)

    if not shape_ids:
        return None

    if kind == h.DIRECT_MOVE_ALL:
        match = h.MOVE_ALL.match(cmd)
        direction = match.group("direction")
        distance = int(match.group("distance") or DEFAULT_MOVE_DISTANCE)
        delta = {
            "up": {"deltaY": -distance},
            "down": {"deltaY": distance},
            "left": {"deltaX": -distance},
            "right": {"deltaX": distance},
        }[direction]
        return _single(
            "batch_update_shapes",
            {"shapeIds": list(shape_ids), **delta},
            f"Move all shapes {direction}",
            f"Done! I've moved all shapes {direction}.",
        )

    if kind == h.DIRECT_ROTATE_ALL:
        angle = int(h.ROTATE_ALL.match(cmd).group("angle")) % 360
        return _single(
            "batch_update_shapes",
            {"shapeIds": list(shape_ids), "deltaRotation": angle},
            f"Rotate all shapes by {angle} degrees",
            f"Done! I've rotated all shapes by {angle} degrees.",
        )

    if kind == h.DIRECT_SCALE_ALL:
        factor, phrase = _scale_factor(cmd)
        return _single(
            "batch_update_shapes",
            {"shapeIds": list(shape_ids), "scaleX": factor, "scaleY": factor},
            f"Scale all shapes by {factor:g}x",
            f"Done! I've made everything {phrase}.",
        )

    raise ValueError(f"Unknown heuristic kind: {kind}")
