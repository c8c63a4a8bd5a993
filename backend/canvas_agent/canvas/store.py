"""Canvas store interface plus the in-process implementation used by the service.

The store owns identifiers, defaults and persistence. Everything above it only
reads snapshots and issues mutation requests through these coroutines.
"""

from __future__ import annotations

import asyncio
import logging
import time
import uuid
from typing import Any, Protocol

from canvas_agent.canvas.constants import DEFAULT_SHAPE_PROPS, MAX_SHAPES
from canvas_agent.models.shapes import CanvasObject, ShapeSeed

logger = logging.getLogger(__name__)

_LINE_ONLY_DEFAULTS = {"stroke", "stroke_width"}


class ShapeNotFoundError(LookupError):
    def __init__(self, shape_id: str) -> None:
        super().__init__(f"Shape not found: {shape_id}")
        self.shape_id = shape_id


class CanvasLimitError(ValueError):
    pass


class CanvasStore(Protocol):
    max_shapes: int

    async def list_shapes(self, canvas_id: str) -> list[CanvasObject]: ...

    async def get_shape(self, canvas_id: str, shape_id: str) -> CanvasObject: ...

    async def create_shape(self, canvas_id: str, seed: ShapeSeed) -> CanvasObject: ...

    async def create_shapes(self, canvas_id: str, seeds: list[ShapeSeed]) -> list[CanvasObject]: ...

    async def update_shape(self, canvas_id: str, shape_id: str, changes: dict[str, Any]) -> CanvasObject: ...

    async def delete_shape(self, canvas_id: str, shape_id: str) -> None: ...

    async def clear(self, canvas_id: str) -> int: ...


def new_shape_id() -> str:
    return f"shape_{int(time.time() * 1000)}_{uuid.uuid4().hex[:9]}"


def _with_defaults(seed: ShapeSeed) -> dict[str, Any]:
    data = seed.model_dump()
    for key, value in DEFAULT_SHAPE_PROPS.items():
        if key in _LINE_ONLY_DEFAULTS and seed.type != "line":
            continue
        if data.get(key) is None:
            data[key] = value
    return data


class InMemoryCanvasStore:
    """Dict-backed store. One asyncio.Lock per canvas serializes its mutations."""

    def __init__(self, max_shapes: int = MAX_SHAPES) -> None:
        self.max_shapes = max_shapes
        self._canvases: dict[str, dict[str, CanvasObject]] = {}
        self._locks: dict[str, asyncio.Lock] = {}

    def _lock(self, canvas_id: str) -> asyncio.Lock:
        if canvas_id not in self._locks:
            self._locks[canvas_id] = asyncio.Lock()
        return self._locks[canvas_id]

    def _shapes(self, canvas_id: str) -> dict[str, CanvasObject]:
        return self._canvases.setdefault(canvas_id, {})

    async def list_shapes(self, canvas_id: str) -> list[CanvasObject]:
        return list(self._shapes(canvas_id).values())

    async def get_shape(self, canvas_id: str, shape_id: str) -> CanvasObject:
        shape = self._shapes(canvas_id).get(shape_id)
        if shape is None:
            raise ShapeNotFoundError(shape_id)
        return shape

    async def create_shape(self, canvas_id: str, seed: ShapeSeed) -> CanvasObject:
        created = await self.create_shapes(canvas_id, [seed])
        return created[0]

    async def create_shapes(self, canvas_id: str, seeds: list[ShapeSeed]) -> list[CanvasObject]:
        async with self._lock(canvas_id):
            shapes = self._shapes(canvas_id)
            if len(shapes) + len(seeds) > self.max_shapes:
                raise CanvasLimitError(
                    f"Canvas limit of {self.max_shapes} shapes exceeded "
                    f"({len(shapes)} existing, {len(seeds)} requested)"
                )
            now = time.time()
            created: list[CanvasObject] = []
            for seed in seeds:
                shape = CanvasObject(
                    id=new_shape_id(), created_at=now, updated_at=now, **_with_defaults(seed)
                )
                shapes[shape.id] = shape
                created.append(shape)
        logger.debug("Created %d shape(s) on %s", len(created), canvas_id)
        return created

    async def update_shape(self, canvas_id: str, shape_id: str, changes: dict[str, Any]) -> CanvasObject:
        async with self._lock(canvas_id):
            shapes = self._shapes(canvas_id)
            current = shapes.get(shape_id)
            if current is None:
                raise ShapeNotFoundError(shape_id)
            update = {}
            for key, value in changes.items():
                if value is None:
                    # Explicit null resets to the store default (or removes the attribute)
                    value = DEFAULT_SHAPE_PROPS.get(key)
                update[key] = value
            update["updated_at"] = time.time()
            shape = current.model_copy(update=update)
            shapes[shape_id] = shape
        return shape

    async def delete_shape(self, canvas_id: str, shape_id: str) -> None:
        async with self._lock(canvas_id):
            shapes = self._shapes(canvas_id)
            if shape_id not in shapes:
                raise ShapeNotFoundError(shape_id)
            del shapes[shape_id]

    async def clear(self, canvas_id: str) -> int:
        async with self._lock(canvas_id):
            shapes = self._shapes(canvas_id)
            count = len(shapes)
            shapes.clear()
        logger.info("Cleared %d shape(s) from %s", count, canvas_id)
        return count
