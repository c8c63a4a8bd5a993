"""Tests for the in-memory canvas store."""

import pytest

from canvas_agent.canvas.store import CanvasLimitError, InMemoryCanvasStore, ShapeNotFoundError
from canvas_agent.models.shapes import ShapeSeed
from tests.conftest import CANVAS_ID


@pytest.mark.asyncio
async def test_create_applies_defaults(store):
    shape = await store.create_shape(CANVAS_ID, ShapeSeed(type="rectangle", x=10, y=20, width=30, height=40))
    assert shape.id.startswith("shape_")
    assert shape.fill == "#cccccc"
    assert shape.opacity == 0.8
    assert shape.rotation == 0
    assert shape.stroke is None


@pytest.mark.asyncio
async def test_line_gets_stroke_defaults(store):
    shape = await store.create_shape(
        CANVAS_ID, ShapeSeed(type="line", x=0, y=0, width=10, height=0, points=[0, 0, 10, 0])
    )
    assert shape.stroke == "#cccccc"
    assert shape.stroke_width == 2


@pytest.mark.asyncio
async def test_update_null_resets_to_default(store):
    shape = await store.create_shape(CANVAS_ID, ShapeSeed(type="circle", width=10, height=10, fill="#FF0000"))
    updated = await store.update_shape(CANVAS_ID, shape.id, {"fill": None, "opacity": 0.3})
    assert updated.fill == "#cccccc"
    assert updated.opacity == 0.3


@pytest.mark.asyncio
async def test_unknown_id_raises(store):
    with pytest.raises(ShapeNotFoundError, match="Shape not found: nope"):
        await store.update_shape(CANVAS_ID, "nope", {"fill": "#000"})
    with pytest.raises(ShapeNotFoundError):
        await store.delete_shape(CANVAS_ID, "nope")


@pytest.mark.asyncio
async def test_clear_returns_count(store):
    await store.create_shapes(CANVAS_ID, [ShapeSeed(type="rectangle") for _ in range(3)])
    assert await store.clear(CANVAS_ID) == 3
    assert await store.list_shapes(CANVAS_ID) == []


@pytest.mark.asyncio
async def test_shape_limit():
    small = InMemoryCanvasStore(max_shapes=2)
    with pytest.raises(CanvasLimitError):
        await small.create_shapes(CANVAS_ID, [ShapeSeed(type="rectangle") for _ in range(3)])
    assert await small.list_shapes(CANVAS_ID) == []


@pytest.mark.asyncio
async def test_canvases_are_isolated(store):
    await store.create_shape("a", ShapeSeed(type="rectangle"))
    assert await store.list_shapes("b") == []
