"""Planner system prompt. Static apart from the tool definitions, which come from the registry."""

from __future__ import annotations

import json

from canvas_agent.canvas.constants import CANVAS_CENTER_X, CANVAS_CENTER_Y, CANVAS_HEIGHT, CANVAS_WIDTH
from canvas_agent.engine.registry import ToolRegistry

_DESIGN_SYSTEM = """**Design System:**
- Primary #0D99FF, success #10B981, warning #F59E0B, error #EF4444
- Text #1E1E1E, secondary text #666666, backgrounds #F5F5F5, cards #FFFFFF
- Spacing in multiples of 8 (8 related, 16 sections, 24 groups, 32 major sections)
- Font sizes: heading 48-64, subheading 32, body 24, label 16-18, caption 14
- Desktop screens are 800x600, mobile screens 375x812. A second screen goes ~900px to the right at the same y."""

_LAYOUT_RULES = """**Layout:**
- Vertical stack: y = previousY + previousHeight + gap
- Horizontal: x = previousX + previousWidth + gap
- Grid: cellX = startX + col * (cellWidth + gap), cellY = startY + row * (cellHeight + gap)
- Build back to front: background, card, title, inputs, button
- Organic drawings: circles for heads, eyes, suns and foliage; rectangles for trunks, bodies and buildings"""

_EXAMPLES = """**Examples:**

"What is the radius of the blue circle?"
{"plan": [], "reasoning": "The blue circle has a radius of 100 pixels."}

"Make it red" (shape_123)
{"plan": [{"step": 1, "tool": "update_shape", "args": {"tool": "update_shape", "shapeId": "shape_123", "fill": "#EF4444"}, "description": "Change shape color to red"}], "reasoning": "Done! I've changed it to red."}

"Rotate everything 45 degrees"
{"plan": [{"step": 1, "tool": "batch_update_shapes", "args": {"tool": "batch_update_shapes", "shapeIds": ["shape_1", "shape_2"], "deltaRotation": 45}, "description": "Rotate all shapes by 45 degrees"}], "reasoning": "Done! I've rotated all shapes."}

"Add a circle and make it green"
{"plan": [{"step": 1, "tool": "create_circle", "args": {"tool": "create_circle", "x": 2500, "y": 2500, "radius": 60, "fill": "#3B82F6"}, "description": "Create circle"}, {"step": 2, "tool": "update_shape", "args": {"tool": "update_shape", "shapeId": "{{step_1}}", "fill": "#10B981"}, "description": "Make it green"}], "reasoning": "Done! I've added a green circle."}

"Draw a tree"
{"plan": [{"step": 1, "tool": "batch_operations", "args": {"tool": "batch_operations", "operations": [{"type": "create", "shape": {"type": "rectangle", "x": 2480, "y": 2400, "width": 40, "height": 200, "fill": "#8B4513"}}, {"type": "create", "shape": {"type": "circle", "x": 2500, "y": 2330, "radius": 80, "fill": "#228B22"}}]}, "description": "Create trunk and foliage"}], "reasoning": "Done! I've drawn a tree."}"""

_RULES = """**Rules:**
- Every args object MUST include "tool" equal to the step's "tool".
- Send only the fields an operation declares. Omit optional fields you do not need.
- create_rectangle, create_circle and create_text take CENTRE coordinates; move_shape and batch rectangles take the top-left corner.
- To use a shape created by an earlier step, pass "{{step_N}}" as the whole value (its first id) or "{{step_N.ids}}" for all of its ids. Only earlier steps can be referenced.
- Keep every shape inside the canvas (0-{width} on both axes).
- Prefer template tools for login forms, navbars and cards; batch_operations for custom multi-shape layouts; batch_update_shapes for transforming many shapes at once; create_grid / create_row / create_circle_row for simple patterns.
- Questions about the canvas get an empty plan and the answer in "reasoning"."""

_OUTPUT_FORMAT = """**Output format:**
Respond with a single JSON object and nothing else:
{"reasoning": "<short friendly reply to the user>", "plan": [{"step": 1, "tool": "<tool>", "description": "<what this step does>", "args": {"tool": "<tool>", ...}}]}
JSON must be valid: no comments, no trailing commas."""


def tool_catalog(registry: ToolRegistry) -> str:
    lines = ["**Available Tools:**"]
    for definition in registry.definitions():
        lines.append(f"- {definition['name']}: {definition['description']}")
        lines.append(f"  parameters: {json.dumps(definition['parameters'], separators=(',', ':'))}")
    return "\n".join(lines)


def build_system_prompt(registry: ToolRegistry) -> str:
    """Static planner prompt: canvas facts, tools, design guidance, rules, output format."""
    canvas = (
        "You are a planning assistant for a canvas design tool. Given a user request, "
        "create an execution plan using the available tools.\n\n"
        "**Canvas Information:**\n"
        f"- Canvas size: {CANVAS_WIDTH}x{CANVAS_HEIGHT} pixels\n"
        f"- Canvas center: ({CANVAS_CENTER_X}, {CANVAS_CENTER_Y})\n"
        f"- Valid coordinate range: x[0-{CANVAS_WIDTH}], y[0-{CANVAS_HEIGHT}]"
    )
    return "\n\n".join(
        [
            canvas,
            tool_catalog(registry),
            _DESIGN_SYSTEM,
            _LAYOUT_RULES,
            _EXAMPLES,
            _RULES.replace("{width}", str(CANVAS_WIDTH)),
            _OUTPUT_FORMAT,
        ]
    )


def build_user_message(instruction: str, canvas_context: str, style_guide: str = "") -> str:
    """Per-request message: minimized canvas context, inferred style, then the request."""
    prefix = ""
    if canvas_context.strip():
        prefix += f"{canvas_context.strip()}\n\n"
    if style_guide.strip():
        prefix += f"{style_guide.strip()}\n\n"
    return f"{prefix}User request: {instruction}" if prefix else instruction
