"""Navigation bar: background, brand, evenly spaced items, active indicator under the first."""

from __future__ import annotations

import re
from dataclasses import dataclass

from canvas_agent.context.style import StyleProfile
from canvas_agent.templates import helpers
from canvas_agent.templates.base import Rendered, Template
from canvas_agent.templates.extractors import extract_color, extract_count, extract_style

NAV_WIDTH = 1200
_HEIGHTS = {"small": 64, "normal": 80, "large": 96}
DEFAULT_ITEMS = ["Home", "About", "Services", "Contact"]


@dataclass
class NavbarParams:
    primary_color: str = "#0D99FF"
    background_color: str = "#FFFFFF"
    items: list[str] | None = None
    item_count: int | None = None
    logo_text: str = "Brand"
    height: float | None = None
    size: str = "normal"
    style: str = "modern"

    @property
    def labels(self) -> list[str]:
        if self.items:
            return list(self.items)
        if self.item_count:
            return [f"Item {i + 1}" for i in range(self.item_count)]
        return list(DEFAULT_ITEMS)

    @property
    def bar_height(self) -> float:
        return self.height or _HEIGHTS[self.size]


class NavbarTemplate(Template):
    name = "navigation_bar"
    tool = "use_navbar_template"
    params_type = NavbarParams
    patterns = [
        re.compile(
            r"\b(create|make|build|design|generate|add)\s+(a|an)?\s*(?:\w+\s+)*"
            r"(nav|navbar|navigation)(\s+(?:bar|menu))?\b",
            re.IGNORECASE,
        )
    ]

    def extract(self, message: str, style: StyleProfile | None = None) -> NavbarParams:
        count = extract_count(message)
        params = NavbarParams(style=extract_style(message), item_count=min(count, 12) if count else None)
        color = extract_color(message, style)
        if color:
            params.primary_color = color
        return params

    def layout_size(self, params: NavbarParams) -> tuple[float, float]:
        return (NAV_WIDTH, params.bar_height)

    def generate(self, params: NavbarParams, x: float, y: float) -> Rendered:
        height = params.bar_height
        labels = params.labels
        seeds = [helpers.rect(x, y, NAV_WIDTH, height, params.background_color)]
        if params.style != "minimal":
            seeds.append(helpers.rect(x, y + height - 1, NAV_WIDTH, 1, "#E5E5E5", opacity=0.5))

        brand_size = 28 if params.style == "bold" else 24
        seeds.append(helpers.label(x + 40, y + (height - brand_size * 1.2) / 2, params.logo_text, brand_size, params.primary_color))

        spacing = min(150, (NAV_WIDTH - 400) / len(labels))
        text_y = y + (height - 16 * 1.2) / 2
        for index, text in enumerate(labels):
            item_x = x + 300 + index * spacing
            color = params.primary_color if index == 0 else "#666666"
            seeds.append(helpers.label(item_x, text_y, text, 16, color))
            if index == 0:
                bar = 4 if params.style == "bold" else 3
                seeds.append(helpers.rect(item_x, y + height - bar - 1, len(text) * 9, bar, params.primary_color))

        return Rendered(seeds, f"{params.style} navigation bar with {len(labels)} items")
