"""Context minimizer: the smallest canvas description a planner needs for one instruction.

The instruction is matched against ordered intent categories (first match
wins) and each category emits only what its operations consume: a count for
creation, ids and the filtering attribute for deletion, ids and positions for
moves, ids and the implicated property for updates, per-type counts for
"how many". Anything else gets a bounded general summary. Never raises.
"""

from __future__ import annotations

import enum
import re
from collections import Counter

from canvas_agent.context.formatters import (
    STATE_HEADER,
    fmt_number,
    format_canvas_state,
    plural,
    position_line,
    size_detail,
)
from canvas_agent.models.shapes import CanvasObject

MOVE_ALL_LIMIT = 20
MOVE_FILTERED_LIMIT = 5
UPDATE_ALL_LIMIT = 15
UPDATE_FILTERED_LIMIT = 10
DEFAULT_LIMIT = 10
# Above this many shapes a blanket rotate/scale only needs the id list
PURE_TRANSFORM_MIN_SHAPES = 3

# Substring of the hex value (without '#') a shape's fill must contain
COLOR_HEX = {
    "red": "ff0000",
    "blue": "0000ff",
    "green": "00ff00",
    "yellow": "ffff00",
    "orange": "ffa500",
    "purple": "800080",
    "pink": "ffc0cb",
    "black": "000000",
    "white": "ffffff",
}

_COLOR_WORD = r"(red|blue|green|yellow|orange|purple|pink|black|white)"
_TYPE_WORD = re.compile(r"(circle|rectangle|square|text|line)")
_TYPE_ALIASES = {"square": "rectangle"}


class Intent(str, enum.Enum):
    CREATE = "create"
    CLEAR = "clear"
    DELETE = "delete"
    MOVE = "move"
    UPDATE = "update"
    COUNT = "count"
    GENERAL = "general"


_INTENT_PATTERNS: list[tuple[Intent, re.Pattern[str]]] = [
    (
        Intent.CREATE,
        re.compile(
            r"^(create|add|draw|make|generate|build)\s+(a\s+|an\s+)?\d*\s*(random\s+)?"
            r"(shape|circle|rectangle|square|line|text|grid|row)"
        ),
    ),
    (Intent.CLEAR, re.compile(r"^(clear|reset|delete\s+all|remove\s+all|start\s+fresh)")),
    (Intent.DELETE, re.compile(r"^(delete|remove|erase)\s+")),
    (Intent.MOVE, re.compile(r"^(move|reposition|shift|drag|place)\s+")),
    (Intent.UPDATE, re.compile(r"^(change|update|modify|make|set|resize|rotate|scale|enlarge|shrink)\s+")),
    (Intent.COUNT, re.compile(r"^how\s+many")),
]

_MOVE_ALL = re.compile(r"^(move|shift)\s+(all|every|everything)")
_UPDATE_ALL = re.compile(r"\b(all|every|everything)\b")
_COLOR_CHANGE = re.compile(r"color|fill|to\s+(red|blue|green|yellow)")
_SIZE_CHANGE = re.compile(r"(bigger|smaller|larger|resize|size|width|height|radius)")
_ROTATION = re.compile(r"rotate|turn|spin")
_SCALING = re.compile(r"scale|enlarge|shrink")
_RELATIVE = re.compile(r"(by\s+\d+\s*%|based\s+on|depending)")


def classify(instruction: str) -> Intent:
    lower = instruction.strip().lower()
    for intent, pattern in _INTENT_PATTERNS:
        if pattern.search(lower):
            return intent
    return Intent.GENERAL


def filter_shapes(
    shapes: list[CanvasObject],
    color: str | None = None,
    shape_type: str | None = None,
) -> list[CanvasObject]:
    """Shapes whose fill contains the colour's hex and whose type matches."""
    target_hex = COLOR_HEX.get(color) if color else None
    shape_type = _TYPE_ALIASES.get(shape_type, shape_type) if shape_type else None
    matched = []
    for shape in shapes:
        if target_hex and target_hex not in (shape.fill or "").lower():
            continue
        if shape_type and shape.type != shape_type:
            continue
        matched.append(shape)
    return matched


def _group(pattern: re.Pattern[str] | str, text: str) -> str | None:
    match = re.search(pattern, text)
    return match.group(1) if match else None


def _header(include_header: bool) -> str:
    return STATE_HEADER if include_header else ""


def _delete_context(lower: str, shapes: list[CanvasObject], header: str) -> str:
    filtered = filter_shapes(shapes, _group(_COLOR_WORD, lower), _group(_TYPE_WORD, lower))
    if not filtered:
        return f"{header}No matching shapes found (total: {len(shapes)})\n"
    out = f"{header}Matching shapes ({len(filtered)} of {len(shapes)}):\n"
    for index, shape in enumerate(filtered, start=1):
        out += f"{index}. {shape.type} (ID: {shape.id}, fill: {shape.fill or 'none'})\n"
    return out


def _move_context(lower: str, shapes: list[CanvasObject], header: str) -> str:
    if _MOVE_ALL.search(lower):
        out = f"{header}All shapes ({len(shapes)}):\n"
        for index, shape in enumerate(shapes[:MOVE_ALL_LIMIT], start=1):
            out += position_line(index, shape)
        if len(shapes) > MOVE_ALL_LIMIT:
            out += f"... and {len(shapes) - MOVE_ALL_LIMIT} more\n"
        return out

    filtered = filter_shapes(shapes, _group(_COLOR_WORD, lower), _group(_TYPE_WORD, lower))
    shown = filtered or shapes[:MOVE_FILTERED_LIMIT]
    out = f"{header}{'Matching' if filtered else 'Recent'} shapes:\n"
    for index, shape in enumerate(shown[:MOVE_FILTERED_LIMIT], start=1):
        out += position_line(index, shape)
    return out


def _property_line(index: int, shape: CanvasObject, color: bool, size: bool, rotation: bool) -> str:
    details = f"{index}. {shape.type} (ID: {shape.id}"
    if color:
        details += f", fill: {shape.fill or 'none'}"
    if size:
        details += size_detail(shape)
    if rotation and shape.rotation is not None:
        details += f", rotation: {fmt_number(shape.rotation)}°"
    return details + ")\n"


def _update_context(lower: str, shapes: list[CanvasObject], header: str) -> str:
    color = bool(_COLOR_CHANGE.search(lower))
    size = bool(_SIZE_CHANGE.search(lower))
    rotation = bool(_ROTATION.search(lower))

    if _UPDATE_ALL.search(lower):
        pure_transform = (rotation or bool(_SCALING.search(lower))) and not _RELATIVE.search(lower)
        if pure_transform and len(shapes) > PURE_TRANSFORM_MIN_SHAPES:
            return f"{header}{len(shapes)} shapes: [{', '.join(s.id for s in shapes)}]\n"

        out = f"{header}All shapes ({len(shapes)}):\n"
        for index, shape in enumerate(shapes[:UPDATE_ALL_LIMIT], start=1):
            out += _property_line(index, shape, color, size, rotation)
        if len(shapes) > UPDATE_ALL_LIMIT:
            out += f"... and {len(shapes) - UPDATE_ALL_LIMIT} more\n"
        return out

    # A colour only filters when it names the target ("the red circle"), not the new value
    filtered = filter_shapes(shapes, _group(rf"the\s+{_COLOR_WORD}", lower), _group(_TYPE_WORD, lower))
    shown = filtered or shapes[:MOVE_FILTERED_LIMIT]
    out = f"{header}{'Matching' if filtered else 'Recent'} shapes:\n"
    for index, shape in enumerate(shown[:UPDATE_FILTERED_LIMIT], start=1):
        out += _property_line(index, shape, color, size, rotation)
    return out


def _count_context(shapes: list[CanvasObject], header: str) -> str:
    out = f"{header}Total: {plural(len(shapes), 'shape')}\n"
    for shape_type, count in Counter(s.type for s in shapes).items():
        out += f"- {plural(count, shape_type)}\n"
    return out


def build_context(
    instruction: str,
    shapes: list[CanvasObject],
    include_header: bool = True,
    default_limit: int = DEFAULT_LIMIT,
) -> str:
    """Minimal canvas description for ``instruction``. Pure; never raises."""
    lower = instruction.strip().lower()
    header = _header(include_header)
    intent = classify(instruction)

    if intent is Intent.CREATE:
        return f"{header}{plural(len(shapes), 'existing shape')}\n"
    if intent is Intent.CLEAR:
        return f"{header}{plural(len(shapes), 'shape')} will be cleared\n"
    if intent is Intent.DELETE:
        return _delete_context(lower, shapes, header)
    if intent is Intent.MOVE:
        return _move_context(lower, shapes, header)
    if intent is Intent.UPDATE:
        return _update_context(lower, shapes, header)
    if intent is Intent.COUNT:
        return _count_context(shapes, header)
    return format_canvas_state(shapes, default_limit, include_header)
