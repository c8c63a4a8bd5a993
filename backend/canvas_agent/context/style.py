"""Infer a user's habitual colours, sizes and spacing from shapes they created."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field

import numpy as np

from canvas_agent.models.shapes import CanvasObject

MIN_SHAPES_FOR_STYLE = 3
_MAX_SPACING = 200


@dataclass
class StyleProfile:
    top_colors: list[str] = field(default_factory=list)
    avg_spacing: int | None = None
    avg_width: int | None = None
    avg_height: int | None = None
    preferred_font_size: float | None = None

    @property
    def primary_color(self) -> str | None:
        return self.top_colors[0] if self.top_colors else None

    def to_prompt(self) -> str:
        lines = ["", "**User's existing style (optional, use when creating similar content):**"]
        if self.top_colors:
            lines.append(f"- Colors used: {', '.join(self.top_colors)}")
        if self.avg_spacing:
            lines.append(f"- Typical spacing: ~{self.avg_spacing}px")
        if self.avg_width and self.avg_height:
            lines.append(f"- Common dimensions: {self.avg_width}x{self.avg_height}px")
        if self.preferred_font_size:
            lines.append(f"- Preferred font size: {self.preferred_font_size:g}px")
        lines.append("For UI requests (login screens, dashboards) follow the design system instead.")
        return "\n".join(lines) + "\n"


def _spacings(shapes: list[CanvasObject]) -> list[float]:
    """Gaps between consecutive shapes along each axis, ignoring zero and far gaps."""
    if len(shapes) < 2:
        return []
    xs = np.array([s.x for s in shapes])
    ys = np.array([s.y for s in shapes])
    gaps = np.concatenate([np.abs(np.diff(xs)), np.abs(np.diff(ys))])
    return gaps[(gaps > 0) & (gaps < _MAX_SPACING)].tolist()


def infer_style(shapes: list[CanvasObject]) -> StyleProfile | None:
    """Style profile for ``shapes``, or None with fewer than three shapes."""
    if len(shapes) < MIN_SHAPES_FOR_STYLE:
        return None

    colors = Counter(s.fill for s in shapes if s.fill)
    spacings = _spacings(shapes)
    sized = np.array([(s.width, s.height) for s in shapes if s.width and s.height])
    font_sizes = Counter(s.font_size for s in shapes if s.font_size)

    return StyleProfile(
        top_colors=[c for c, _ in colors.most_common(3)],
        avg_spacing=round(float(np.mean(spacings))) if spacings else None,
        avg_width=round(float(sized[:, 0].mean())) if len(sized) else None,
        avg_height=round(float(sized[:, 1].mean())) if len(sized) else None,
        preferred_font_size=font_sizes.most_common(1)[0][0] if font_sizes else None,
    )
