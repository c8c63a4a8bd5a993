"""Content card: optional image placeholder, title, two-line description and button."""

from __future__ import annotations

import re
from dataclasses import dataclass

from canvas_agent.context.style import StyleProfile
from canvas_agent.templates import helpers
from canvas_agent.templates.base import Rendered, Template
from canvas_agent.templates.extractors import extract_color, extract_size, extract_style

_WIDTHS = {"small": 300, "normal": 360, "large": 420}
_RATIOS = {"16:9": 16 / 9, "4:3": 4 / 3, "1:1": 1.0, "square": 1.0}
_PARTS = re.compile(r"\b(image|title|description|button|photo|picture|heading|text|body|cta|action)\b")


@dataclass
class CardParams:
    primary_color: str = "#0D99FF"
    style: str = "modern"
    size: str = "normal"
    title_text: str = "Card Title"
    button_text: str = "Learn More"
    image_aspect_ratio: str | None = None
    has_image: bool = True
    has_title: bool = True
    has_description: bool = True
    has_button: bool = True

    @property
    def width(self) -> float:
        return _WIDTHS[self.size]

    @property
    def image_height(self) -> float:
        if self.image_aspect_ratio is None:
            return 180
        return round((self.width - 40) / _RATIOS[self.image_aspect_ratio])

    @property
    def height(self) -> float:
        height = 40
        if self.has_image:
            height += self.image_height + 20
        if self.has_title:
            height += 60
        if self.has_description:
            height += 80
        if self.has_button:
            height += 80
        return height

    def parts(self) -> list[str]:
        flags = [
            ("image", self.has_image),
            ("title", self.has_title),
            ("description", self.has_description),
            ("button", self.has_button),
        ]
        return [name for name, on in flags if on]


class CardTemplate(Template):
    name = "card_layout"
    tool = "use_card_template"
    params_type = CardParams
    patterns = [
        re.compile(
            r"\b(create|make|build|design|generate|add)\s+(a|an)?\s*card(\s+(layout|component|element))?\b",
            re.IGNORECASE,
        )
    ]

    def extract(self, message: str, style: StyleProfile | None = None) -> CardParams:
        lower = message.lower()
        params = CardParams(style=extract_style(message), size=extract_size(message))
        color = extract_color(message, style)
        if color:
            params.primary_color = color
        if _PARTS.search(lower):
            params.has_image = any(w in lower for w in ("image", "picture", "photo"))
            params.has_title = "title" in lower or "heading" in lower
            params.has_description = any(w in lower for w in ("description", "text", "body"))
            params.has_button = any(w in lower for w in ("button", "cta", "action"))
        return params

    def layout_size(self, params: CardParams) -> tuple[float, float]:
        return (params.width, params.height)

    def generate(self, params: CardParams, x: float, y: float) -> Rendered:
        width = params.width
        radius = 8 if params.style == "minimal" else 12
        seeds = helpers.card(x, y, width, params.height, radius)
        cursor = y + 20

        if params.has_image:
            image_height = params.image_height
            seeds.append(helpers.rect(x + 20, cursor, width - 40, image_height, "#F0F0F0", corner_radius=8))
            seeds.append(helpers.centered_label(x + 20, cursor + image_height / 2 - 10, width - 40, "Image", 16, "#CCCCCC"))
            cursor += image_height + 20

        if params.has_title:
            seeds.append(helpers.label(x + 20, cursor, params.title_text, 24, "#1A1A1A"))
            cursor += 50

        if params.has_description:
            seeds.append(helpers.label(x + 20, cursor, "This is a description text that explains", 16, "#666666"))
            seeds.append(helpers.label(x + 20, cursor + 22, "what the card is about.", 16, "#666666"))
            cursor += 70

        if params.has_button:
            shapes, _ = helpers.button(
                x + 20, cursor, width - 40, params.button_text, params.primary_color, params.style, with_shadow=False
            )
            seeds += shapes

        return Rendered(seeds, f"{params.style} card with {', '.join(params.parts())}")
