"""Canvas-wide utilities: clearing and random fill."""

from __future__ import annotations

from canvas_agent.canvas.random_shapes import generate_random_shapes
from canvas_agent.engine.context import ActionResult, ExecutionContext
from canvas_agent.engine.registry import tool
from canvas_agent.models.operations import AddRandomShapesArgs, ClearCanvasArgs


@tool(name="clear_canvas", args=ClearCanvasArgs, category="utility")
async def clear_canvas(args: ClearCanvasArgs, ctx: ExecutionContext) -> ActionResult:
    """Delete every shape on the canvas."""
    count = await ctx.store.clear(ctx.canvas_id)
    return ActionResult([], f"Cleared {count} shape(s)")


@tool(name="add_random_shapes", args=AddRandomShapesArgs, category="utility")
async def add_random_shapes(args: AddRandomShapesArgs, ctx: ExecutionContext) -> ActionResult:
    """Scatter randomly sized and coloured shapes across the canvas."""
    seeds = generate_random_shapes(args.count, args.types, args.balanced, rng=ctx.rng)
    shapes = await ctx.store.create_shapes(ctx.canvas_id, ctx.stamp(seeds))
    return ActionResult([s.id for s in shapes], f"Added {len(shapes)} random shape(s)")
