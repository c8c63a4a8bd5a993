"""Template lookup, request detection and placement on the canvas."""

from __future__ import annotations

import logging
import re
from typing import Any

from canvas_agent.canvas.constants import DEFAULT_VIEWPORT
from canvas_agent.canvas.geometry import Viewport, optimal_position
from canvas_agent.models.shapes import CanvasObject
from canvas_agent.templates.base import Rendered, Template
from canvas_agent.templates.card import CardTemplate
from canvas_agent.templates.extractors import is_multi_template
from canvas_agent.templates.login_form import LoginFormTemplate
from canvas_agent.templates.navbar import NavbarTemplate

logger = logging.getLogger(__name__)

TEMPLATES: list[Template] = [LoginFormTemplate(), NavbarTemplate(), CardTemplate()]

# Custom copy, counts or extra features are better parsed by the planner
_CUSTOMIZATION = [
    re.compile(r"\b(titled?|called?|named?|heading|header|title|subtitle|tagline)\b", re.IGNORECASE),
    re.compile(r"\b(button|logo|brand|branding)\s*:", re.IGNORECASE),
    re.compile(r"\bwith\s+(a\s+)?(title|subtitle|button|logo|brand)", re.IGNORECASE),
    re.compile(r"\b\d+\s+(items?|buttons?|links?|fields?)\b", re.IGNORECASE),
    re.compile(r"\bwith\s+(a\s+)?\d+", re.IGNORECASE),
    re.compile(r"\bwith\s+(email|password|username|phone|image|description)", re.IGNORECASE),
    re.compile(r"\band\s+(google|facebook|twitter|github)", re.IGNORECASE),
]


def has_customization(message: str) -> bool:
    return any(p.search(message) for p in _CUSTOMIZATION)


def get_template(tool_or_name: str) -> Template:
    for template in TEMPLATES:
        if tool_or_name in (template.tool, template.name):
            return template
    raise KeyError(f"Template not found: {tool_or_name}")


def detect_template(message: str) -> Template | None:
    """Template for a plain template request, or None when the planner should handle it."""
    if is_multi_template(message):
        return None
    for template in TEMPLATES:
        if template.matches(message):
            if has_customization(message):
                return None
            return template
    return None


def render(
    template: Template,
    overrides: dict[str, Any],
    shapes: list[CanvasObject],
    viewport: Viewport | None = None,
) -> Rendered:
    """Lay the template out at the best free spot for its size."""
    params = template.merge(template.defaults(), overrides)
    width, height = template.layout_size(params)
    x, y = optimal_position(width, height, shapes, viewport or DEFAULT_VIEWPORT)
    logger.debug("Template %s: %gx%g at (%g, %g)", template.name, width, height, x, y)
    return template.generate(params, x, y)
