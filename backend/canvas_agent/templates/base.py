"""Template protocol: parse options from text, size the layout, emit shapes."""

from __future__ import annotations

import re
from dataclasses import dataclass, fields, replace
from typing import Any, ClassVar

from canvas_agent.context.style import StyleProfile
from canvas_agent.models.shapes import ShapeSeed


@dataclass
class Rendered:
    seeds: list[ShapeSeed]
    description: str


class Template:
    """One parameterized UI layout.

    Subclasses set ``name``, ``tool``, ``patterns`` and ``params_type`` (a
    dataclass whose fields mirror the tool's argument names), and implement
    ``extract``, ``layout_size`` and ``generate``.
    """

    name: ClassVar[str]
    tool: ClassVar[str]
    patterns: ClassVar[list[re.Pattern[str]]]
    params_type: ClassVar[type]

    def matches(self, message: str) -> bool:
        return any(p.search(message) for p in self.patterns)

    def defaults(self) -> Any:
        return self.params_type()

    def extract(self, message: str, style: StyleProfile | None = None) -> Any:
        raise NotImplementedError

    def merge(self, params: Any, overrides: dict[str, Any]) -> Any:
        """Apply explicit (non-null) overrides on top of ``params``."""
        known = {f.name for f in fields(params)}
        return replace(params, **{k: v for k, v in overrides.items() if k in known and v is not None})

    def layout_size(self, params: Any) -> tuple[float, float]:
        raise NotImplementedError

    def generate(self, params: Any, x: float, y: float) -> Rendered:
        raise NotImplementedError

    def to_args(self, params: Any) -> dict[str, Any]:
        """Tool arguments that reproduce ``params`` when sent through the executor."""
        args: dict[str, Any] = {"tool": self.tool}
        defaults = self.defaults()
        for f in fields(params):
            value = getattr(params, f.name)
            if value != getattr(defaults, f.name):
                args[f.name] = value
        return args
