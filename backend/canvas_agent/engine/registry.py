"""Tool registry: operation name -> (argument schema, canvas action).

Usage:
    @tool(name="create_circle", args=CreateCircleArgs, category="create")
    async def create_circle(args: CreateCircleArgs, ctx: ExecutionContext) -> ActionResult:
        ...

Adding a new operation = one decorated coroutine in ``canvas_agent.tools``.
``build_registry()`` imports those modules and freezes the result; the frozen
registry is what gets handed to the executor.
"""

from __future__ import annotations

import importlib
import logging
import pkgutil
from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Awaitable, Callable, Mapping

if TYPE_CHECKING:
    from canvas_agent.engine.context import ActionResult, ExecutionContext
    from canvas_agent.models.base import StrictModel

logger = logging.getLogger(__name__)

Action = Callable[[Any, "ExecutionContext"], Awaitable["ActionResult"]]


@dataclass(frozen=True)
class ToolSpec:
    name: str
    args_model: type["StrictModel"]
    action: Action
    description: str = ""
    category: str = "general"

    def definition(self) -> dict[str, Any]:
        """JSON-schema tool definition in the shape the planner consumes."""
        return {
            "name": self.name,
            "description": self.description,
            "category": self.category,
            "parameters": self.args_model.model_json_schema(by_alias=True),
        }


class ToolRegistry:
    """Name -> ToolSpec map. Mutable until ``freeze()``, read-only after."""

    def __init__(self) -> None:
        self._tools: Mapping[str, ToolSpec] = {}
        self._frozen = False

    def register(self, spec: ToolSpec) -> None:
        if self._frozen:
            raise RuntimeError(f"Registry is frozen; cannot register {spec.name}")
        if spec.name in self._tools:
            raise ValueError(f"Duplicate tool name: {spec.name}")
        self._tools[spec.name] = spec  # type: ignore[index]
        logger.debug("Registered tool %s (%s)", spec.name, spec.category)

    def freeze(self) -> ToolRegistry:
        if not self._frozen:
            self._tools = MappingProxyType(dict(self._tools))
            self._frozen = True
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    def lookup(self, name: str) -> ToolSpec | None:
        return self._tools.get(name)

    def get(self, name: str) -> ToolSpec:
        return self._tools[name]

    def names(self) -> list[str]:
        return sorted(self._tools)

    def all(self) -> list[ToolSpec]:
        return sorted(self._tools.values(), key=lambda s: (s.category, s.name))

    def definitions(self) -> list[dict[str, Any]]:
        return [spec.definition() for spec in self.all()]

    def __contains__(self, name: object) -> bool:
        return name in self._tools

    @property
    def count(self) -> int:
        return len(self._tools)


# Module-level registry the @tool decorator writes into
_registry = ToolRegistry()


def get_registry() -> ToolRegistry:
    return _registry


def tool(
    *,
    name: str,
    args: type["StrictModel"],
    description: str = "",
    category: str = "general",
):
    """Decorator to register a canvas action coroutine."""

    def decorator(fn: Action) -> Action:
        _registry.register(
            ToolSpec(
                name=name,
                args_model=args,
                action=fn,
                description=description or (fn.__doc__ or "").strip().split("\n")[0],
                category=category,
            )
        )
        return fn

    return decorator


def build_registry() -> ToolRegistry:
    """Import every module in ``canvas_agent.tools`` so @tool fires, then freeze."""
    package = importlib.import_module("canvas_agent.tools")
    for _, module_name, _ in pkgutil.iter_modules(package.__path__):
        importlib.import_module(f"canvas_agent.tools.{module_name}")
    logger.info("Tool registry ready: %d tools", _registry.count)
    return _registry.freeze()
