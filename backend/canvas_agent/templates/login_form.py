"""Login form: card with accent strip, title, optional social buttons, fields, submit, signup link."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from canvas_agent.context.style import StyleProfile
from canvas_agent.templates import helpers
from canvas_agent.templates.base import Rendered, Template
from canvas_agent.templates.extractors import (
    extract_color,
    extract_fields,
    extract_size,
    extract_social_providers,
    extract_style,
)

_CARD_SIZES = {"small": (380, 48), "normal": (442, 56), "large": (520, 64)}

FIELD_COPY = {
    "username": ("USERNAME", "Enter your username"),
    "email": ("EMAIL", "you@example.com"),
    "password": ("PASSWORD", "••••••••••"),
    "phone": ("PHONE NUMBER", "+1 (555) 000-0000"),
    "name": ("NAME", "Enter your name"),
}

PROVIDERS = {
    "google": ("Continue with Google", "#4285F4"),
    "facebook": ("Continue with Facebook", "#1877F2"),
    "twitter": ("Continue with Twitter", "#1DA1F2"),
    "github": ("Continue with GitHub", "#24292E"),
}


@dataclass
class LoginParams:
    primary_color: str = "#0D99FF"
    size: str = "normal"
    style: str = "modern"
    fields: list[str] = field(default_factory=lambda: ["email", "password"])
    social_providers: list[str] = field(default_factory=list)
    title_text: str = "Welcome Back"
    subtitle_text: str = "Sign in to continue"
    button_text: str = "Sign In"

    @property
    def card_width(self) -> float:
        return _CARD_SIZES[self.size][0]

    @property
    def title_size(self) -> float:
        return _CARD_SIZES[self.size][1]

    @property
    def corner_radius(self) -> float:
        return 8 if self.style == "minimal" else 16

    @property
    def show_signup_link(self) -> bool:
        return self.style != "minimal"

    @property
    def card_height(self) -> float:
        height = 150 + len(self.fields) * 90 + 80
        if self.social_providers:
            height += len(self.social_providers) * 60 + 40
        if self.show_signup_link:
            height += 40
        return height


class LoginFormTemplate(Template):
    name = "login_form"
    tool = "use_login_template"
    params_type = LoginParams
    patterns = [
        re.compile(
            r"\b(create|make|build|design|generate|add)\s+(a|an)?\s*(?:\w+\s+)*"
            r"(login|signin|sign-in|sign\s+in)(\s+(?:form|page|screen|ui))?\b",
            re.IGNORECASE,
        )
    ]

    def extract(self, message: str, style: StyleProfile | None = None) -> LoginParams:
        params = LoginParams(size=extract_size(message), style=extract_style(message))
        color = extract_color(message, style)
        if color:
            params.primary_color = color
        params.fields = extract_fields(message) or params.fields
        params.social_providers = extract_social_providers(message)
        return params

    def layout_size(self, params: LoginParams) -> tuple[float, float]:
        # Background panel overhangs the card by 100/50 on each side
        return (params.card_width + 200, params.card_height + 100)

    def generate(self, params: LoginParams, x: float, y: float) -> Rendered:
        card_x, card_y = x + 100, y + 50
        width, height = params.card_width, params.card_height

        seeds = [helpers.rect(x, y, width + 200, height + 100, "#F8F9FA")]
        seeds += helpers.card(card_x, card_y, width, height, params.corner_radius)
        seeds.append(helpers.accent_strip(card_x, card_y, height, params.primary_color))

        left = card_x + 40
        content_width = width - 80
        cursor = card_y + 48

        seeds.append(helpers.label(left, cursor, params.title_text, params.title_size, "#1A1A1A"))
        cursor += params.title_size + 16
        seeds.append(helpers.label(left, cursor, params.subtitle_text, 18, "#666666"))
        cursor += 50

        if params.social_providers:
            for provider in params.social_providers:
                text, color = PROVIDERS[provider]
                shapes, used = helpers.social_button(left, cursor, content_width, text, color)
                seeds += shapes
                cursor += used
            shapes, used = helpers.divider(left, cursor, content_width, "or")
            seeds += shapes
            cursor += used

        for name in params.fields:
            caption, placeholder = FIELD_COPY.get(name, (name.upper(), f"Enter {name}"))
            shapes, used = helpers.input_field(left, cursor, content_width, caption, placeholder, params.style)
            seeds += shapes
            cursor += used + 16

        shapes, _ = helpers.button(
            left, cursor, content_width, params.button_text, params.primary_color, params.style
        )
        seeds += shapes
        cursor += 72

        if params.show_signup_link:
            seeds.append(helpers.label(left + 50, cursor, "Don't have an account? Sign up", 14, params.primary_color))

        extras = f" and {', '.join(params.social_providers)} sign-in" if params.social_providers else ""
        return Rendered(
            seeds,
            f"{params.style} login form with {', '.join(params.fields)} fields{extras}",
        )
