"""Single-primitive creation tools. Planner coordinates are centres (endpoints for lines)."""

from __future__ import annotations

from canvas_agent.engine.context import ActionResult, ExecutionContext
from canvas_agent.engine.registry import tool
from canvas_agent.models.operations import (
    CreateCircleArgs,
    CreateLineArgs,
    CreateRectangleArgs,
    CreateTextArgs,
)


async def _create_one(args, ctx: ExecutionContext, label: str) -> ActionResult:
    (seed,) = ctx.stamp([args.to_seed()])
    shape = await ctx.store.create_shape(ctx.canvas_id, seed)
    return ActionResult([shape.id], f"Created {label} {shape.id}")


@tool(name="create_rectangle", args=CreateRectangleArgs, category="create")
async def create_rectangle(args: CreateRectangleArgs, ctx: ExecutionContext) -> ActionResult:
    """Create one rectangle centred at (x, y)."""
    return await _create_one(args, ctx, "rectangle")


@tool(name="create_circle", args=CreateCircleArgs, category="create")
async def create_circle(args: CreateCircleArgs, ctx: ExecutionContext) -> ActionResult:
    """Create one circle centred at (x, y)."""
    return await _create_one(args, ctx, "circle")


@tool(name="create_text", args=CreateTextArgs, category="create")
async def create_text(args: CreateTextArgs, ctx: ExecutionContext) -> ActionResult:
    """Create one single-line text label centred at (x, y)."""
    return await _create_one(args, ctx, "text")


@tool(name="create_line", args=CreateLineArgs, category="create")
async def create_line(args: CreateLineArgs, ctx: ExecutionContext) -> ActionResult:
    """Create one straight line between two endpoints."""
    return await _create_one(args, ctx, "line")
