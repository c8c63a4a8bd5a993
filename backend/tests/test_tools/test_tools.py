"""Tests for canvas actions run through the executor."""

import pytest

from canvas_agent.canvas.store import InMemoryCanvasStore
from canvas_agent.engine.context import ExecutionContext
from canvas_agent.engine.errors import ActionFailedError
from canvas_agent.models.plan import Plan
from canvas_agent.models.shapes import ShapeSeed
from tests.conftest import CANVAS_ID


def _plan(*steps) -> Plan:
    return Plan.model_validate(
        {"plan": [{"step": i, "tool": tool, "args": {"tool": tool, **args}} for i, (tool, args) in enumerate(steps, 1)]}
    )


async def _run(executor, ctx, *steps):
    return await executor.execute(_plan(*steps), ctx)


@pytest.mark.asyncio
async def test_create_primitives_convert_to_top_left(executor, ctx, store):
    await _run(
        executor,
        ctx,
        ("create_rectangle", {"x": 1000, "y": 1000, "width": 200, "height": 100, "fill": "#FF0000"}),
        ("create_text", {"x": 2000, "y": 2000, "text": "Hi", "fontSize": 50}),
        ("create_line", {"x1": 100, "y1": 100, "x2": 300, "y2": 50, "stroke": "#00FF00"}),
    )
    rect, text, line = await store.list_shapes(CANVAS_ID)
    assert (rect.x, rect.y) == (900, 950)
    assert text.fill == "#000000"
    assert (text.x, text.width) == (1970, 60)
    assert line.points == [100, 100, 300, 50]
    assert (line.x, line.y, line.width, line.height) == (100, 50, 200, 50)
    assert rect.created_by == "ai-agent"


@pytest.mark.asyncio
async def test_move_resize_rotate_delete(executor, ctx, store):
    results = await _run(
        executor,
        ctx,
        ("create_rectangle", {"x": 500, "y": 500, "width": 100, "height": 100}),
        ("move_shape", {"shapeId": "{{step_1}}", "x": 50}),
        ("resize_shape", {"shapeId": "{{step_1}}", "height": 300}),
        ("rotate_shape", {"shapeId": "{{step_1}}", "rotation": 90}),
    )
    (shape,) = await store.list_shapes(CANVAS_ID)
    assert (shape.x, shape.y, shape.height, shape.rotation) == (50, 450, 300, 90)

    await _run(executor, ctx, ("delete_shape", {"shapeId": results[0].primary_id}))
    assert await store.list_shapes(CANVAS_ID) == []


@pytest.mark.asyncio
async def test_update_text_reestimates_box(executor, ctx, store):
    await _run(
        executor,
        ctx,
        ("create_text", {"x": 1000, "y": 1000, "text": "Hi", "fontSize": 50}),
        ("update_shape", {"shapeId": "{{step_1}}", "text": "Hello"}),
    )
    (shape,) = await store.list_shapes(CANVAS_ID)
    assert shape.text == "Hello"
    assert shape.width == 150
    assert shape.x == 925


@pytest.mark.asyncio
async def test_update_null_fill_resets(executor, ctx, store):
    await _run(
        executor,
        ctx,
        ("create_circle", {"x": 500, "y": 500, "radius": 50, "fill": "#FF0000"}),
        ("update_shape", {"shapeId": "{{step_1}}", "fill": None, "width": None}),
    )
    (shape,) = await store.list_shapes(CANVAS_ID)
    assert shape.fill == "#cccccc"
    assert shape.width == 100


@pytest.mark.asyncio
async def test_radius_on_rectangle_fails(executor, ctx):
    with pytest.raises(ActionFailedError, match="radius only applies to circles"):
        await _run(
            executor,
            ctx,
            ("create_rectangle", {"x": 500, "y": 500, "width": 100, "height": 100}),
            ("update_shape", {"shapeId": "{{step_1}}", "radius": 20}),
        )


@pytest.mark.asyncio
async def test_batch_operations_mixed(executor, ctx, store):
    (first,) = await _run(
        executor,
        ctx,
        ("create_grid", {"rows": 1, "cols": 2}),
    )
    keep, drop = first.shape_ids
    (batch,) = await _run(
        executor,
        ctx,
        (
            "batch_operations",
            {
                "operations": [
                    {"type": "create", "shape": {"type": "circle", "x": 1000, "y": 1000, "radius": 40}},
                    {"type": "update", "shapeId": keep, "updates": {"fill": "#FF0000", "rotation": 30}},
                    {"type": "delete", "shapeId": drop},
                ]
            },
        ),
    )
    shapes = {s.id: s for s in await store.list_shapes(CANVAS_ID)}
    assert drop not in shapes
    assert shapes[keep].fill == "#FF0000"
    assert shapes[keep].rotation == 30
    assert len(batch.shape_ids) == 2
    assert batch.shape_ids[1] == keep


@pytest.mark.asyncio
async def test_batch_operations_missing_target_changes_nothing(executor, ctx, store):
    with pytest.raises(ActionFailedError, match="ghost"):
        await _run(
            executor,
            ctx,
            (
                "batch_operations",
                {
                    "operations": [
                        {"type": "create", "shape": {"type": "circle", "x": 1000, "y": 1000, "radius": 40}},
                        {"type": "delete", "shapeId": "ghost"},
                    ]
                },
            ),
        )
    assert await store.list_shapes(CANVAS_ID) == []


@pytest.mark.asyncio
async def test_batch_operations_bad_update_changes_nothing(executor, ctx, store):
    (grid,) = await _run(executor, ctx, ("create_grid", {"rows": 1, "cols": 2}))
    first, second = grid.shape_ids
    before = {s.id: s for s in await store.list_shapes(CANVAS_ID)}

    with pytest.raises(ActionFailedError, match="operation 2: radius only applies to circles"):
        await _run(
            executor,
            ctx,
            (
                "batch_operations",
                {
                    "operations": [
                        {"type": "delete", "shapeId": first},
                        {"type": "update", "shapeId": second, "updates": {"radius": 20}},
                    ]
                },
            ),
        )
    after = {s.id: s for s in await store.list_shapes(CANVAS_ID)}
    assert after == before


@pytest.mark.asyncio
async def test_batch_operations_over_limit_changes_nothing(executor):
    small = InMemoryCanvasStore(max_shapes=1)
    ctx = ExecutionContext(canvas_id=CANVAS_ID, store=small)
    circle = {"type": "create", "shape": {"type": "circle", "x": 1000, "y": 1000, "radius": 40}}

    with pytest.raises(ActionFailedError, match="Canvas limit of 1 shapes exceeded by batch"):
        await _run(executor, ctx, ("batch_operations", {"operations": [circle, circle]}))
    assert await small.list_shapes(CANVAS_ID) == []


@pytest.mark.asyncio
async def test_batch_operations_delete_frees_room_for_create(executor):
    small = InMemoryCanvasStore(max_shapes=1)
    ctx = ExecutionContext(canvas_id=CANVAS_ID, store=small)
    (old,) = await small.create_shapes(CANVAS_ID, [ShapeSeed(type="rectangle", x=0, y=0, width=50, height=50)])
    circle = {"type": "create", "shape": {"type": "circle", "x": 1000, "y": 1000, "radius": 40}}

    (batch,) = await _run(
        executor, ctx, ("batch_operations", {"operations": [{"type": "delete", "shapeId": old.id}, circle]})
    )
    (shape,) = await small.list_shapes(CANVAS_ID)
    assert shape.type == "circle"
    assert batch.shape_ids == [shape.id]


@pytest.mark.asyncio
async def test_batch_update_shapes_relative(executor, ctx, store):
    await _run(
        executor,
        ctx,
        ("create_rectangle", {"x": 1000, "y": 1000, "width": 100, "height": 100}),
        ("create_line", {"x1": 100, "y1": 100, "x2": 200, "y2": 100}),
        ("batch_update_shapes", {"shapeIds": "{{step_1.ids}}", "deltaX": 50, "deltaRotation": -350}),
    )
    rect, line = await store.list_shapes(CANVAS_ID)
    assert rect.x == 1000
    assert rect.rotation == 10
    assert line.x == 100

    ids = [rect.id, line.id]
    await _run(executor, ctx, ("batch_update_shapes", {"shapeIds": ids, "scaleX": 2, "scaleY": 2, "deltaY": 10}))
    rect, line = await store.list_shapes(CANVAS_ID)
    assert (rect.width, rect.x, rect.y) == (200, 950, 910)
    assert line.points == [50, 110, 250, 110]


@pytest.mark.asyncio
async def test_patterns(executor, ctx, store):
    grid, row, circles = await _run(
        executor,
        ctx,
        ("create_grid", {"rows": 2, "cols": 3}),
        ("create_row", {"count": 4}),
        ("create_circle_row", {"count": 3, "startX": 500, "radius": 40, "spacing": 20}),
    )
    assert len(grid.shape_ids) == 6
    assert len(row.shape_ids) == 4
    shapes = {s.id: s for s in await store.list_shapes(CANVAS_ID)}
    xs = [shapes[i].x for i in circles.shape_ids]
    assert xs == [460, 560, 660]


@pytest.mark.asyncio
async def test_clear_and_random(executor, ctx, store):
    add, clear = await _run(
        executor,
        ctx,
        ("add_random_shapes", {"count": 8, "types": ["circle", "text"]}),
        ("clear_canvas", {}),
    )
    assert len(add.shape_ids) == 8
    assert clear.shape_ids == []
    assert "Cleared 8" in clear.message
    assert await store.list_shapes(CANVAS_ID) == []


@pytest.mark.asyncio
async def test_templates_create_shapes(executor, ctx, store):
    login, navbar, card = await _run(
        executor,
        ctx,
        ("use_login_template", {"primaryColor": "#FF0000", "socialProviders": ["google"]}),
        ("use_navbar_template", {"items": ["Home", "About"]}),
        ("use_card_template", {"hasButton": False}),
    )
    assert len(login.shape_ids) > 5
    assert len(navbar.shape_ids) > 3
    assert len(card.shape_ids) > 3
    shapes = await store.list_shapes(CANVAS_ID)
    assert len(shapes) == len(login.shape_ids) + len(navbar.shape_ids) + len(card.shape_ids)
    texts = {s.text for s in shapes if s.type == "text"}
    assert {"Home", "About"} <= texts
