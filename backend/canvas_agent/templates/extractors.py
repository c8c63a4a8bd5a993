"""Pull template options out of a free-text request."""

from __future__ import annotations

import re

from canvas_agent.context.style import StyleProfile

COLOR_WORDS = {
    "blue": "#0D99FF",
    "red": "#EF4444",
    "green": "#10B981",
    "purple": "#8B5CF6",
    "orange": "#F59E0B",
    "pink": "#EC4899",
    "yellow": "#F59E0B",
    "teal": "#14B8A6",
    "indigo": "#6366F1",
    "black": "#1E1E1E",
    "white": "#FFFFFF",
    "gray": "#6B7280",
    "grey": "#6B7280",
}

TEMPLATE_KEYWORDS = ("login", "signin", "navbar", "navigation", "card", "dashboard", "footer")

_COUNT = re.compile(r"\b(\d+)\s+(items?|buttons?|links?|cards?|fields?)\b", re.IGNORECASE)
_LOGIN_WORDS = re.compile(r"login|signin|sign-in|sign\s+in")


def extract_color(message: str, style: StyleProfile | None = None) -> str | None:
    """Explicit colour word wins; otherwise the user's usual colour, if any."""
    lower = message.lower()
    for word, hex_value in COLOR_WORDS.items():
        if re.search(rf"\b{word}\b", lower):
            return hex_value
    if style is not None and style.primary_color:
        return style.primary_color
    return None


def extract_size(message: str) -> str:
    lower = message.lower()
    if "large" in lower or "big" in lower:
        return "large"
    if "small" in lower or "compact" in lower or "tiny" in lower:
        return "small"
    return "normal"


def extract_style(message: str) -> str:
    lower = message.lower()
    if "minimal" in lower or "simple" in lower:
        return "minimal"
    if "bold" in lower:
        return "bold"
    return "modern"


def extract_count(message: str) -> int | None:
    match = _COUNT.search(message)
    return int(match.group(1)) if match else None


def extract_fields(message: str) -> list[str]:
    lower = message.lower()
    fields = [name for name in ("username", "email", "password", "phone") if name in lower]
    if re.search(r"\bname\b", lower):
        fields.append("name")
    if not fields and _LOGIN_WORDS.search(lower):
        fields = ["email", "password"]
    return fields


def extract_social_providers(message: str) -> list[str]:
    lower = message.lower()
    providers = [p for p in ("google", "facebook", "twitter", "github") if p in lower]
    if not providers and ("social" in lower or "sso" in lower):
        providers = ["google", "facebook"]
    return providers


def is_multi_template(message: str) -> bool:
    """More than one template keyword, or joined requests, need the planner."""
    lower = message.lower()
    hits = sum(1 for keyword in TEMPLATE_KEYWORDS if keyword in lower)
    return hits > 1 or bool(re.search(r"\b(and|plus|with a)\b", lower))
