"""Single-shape modification tools: update, move, resize, rotate, delete."""

from __future__ import annotations

import logging
from typing import Any

from canvas_agent.canvas.geometry import (
    circle_box,
    move_changes,
    resize_changes,
    text_box,
    top_left_to_center,
)
from canvas_agent.canvas.constants import DEFAULT_FONT_SIZE
from canvas_agent.engine.context import ActionResult, ExecutionContext
from canvas_agent.engine.registry import tool
from canvas_agent.models.operations import (
    DeleteShapeArgs,
    MoveShapeArgs,
    ResizeShapeArgs,
    RotateShapeArgs,
    UpdateShapeArgs,
)
from canvas_agent.models.shapes import CanvasObject

logger = logging.getLogger(__name__)


def expand_changes(shape: CanvasObject, changes: dict[str, Any]) -> dict[str, Any]:
    """Turn requested attribute changes into stored-attribute changes.

    Radius becomes a square box around the old centre. Moving (x/y) also moves
    line endpoints. New text or font size re-estimates a text box around its
    centre unless width/height were given explicitly.
    """
    changes = dict(changes)

    if "radius" in changes:
        radius = changes.pop("radius")
        if shape.type != "circle":
            raise ValueError(f"radius only applies to circles ({shape.id} is a {shape.type})")
        cx, cy = top_left_to_center(shape.x, shape.y, shape.width or 0.0, shape.height or 0.0)
        changes.update(circle_box(cx, cy, radius))

    if "x" in changes or "y" in changes:
        moved = move_changes(shape, changes.pop("x", None), changes.pop("y", None))
        changes.update(moved)

    if shape.type == "text" and ("text" in changes or "font_size" in changes):
        if "width" not in changes and "height" not in changes:
            text = changes.get("text", shape.text) or ""
            font_size = changes.get("font_size", shape.font_size) or DEFAULT_FONT_SIZE
            cx, cy = top_left_to_center(
                changes.get("x", shape.x), changes.get("y", shape.y), shape.width or 0.0, shape.height or 0.0
            )
            changes.update(text_box(cx, cy, text, font_size))

    return changes


async def apply_changes(ctx: ExecutionContext, shape: CanvasObject, changes: dict[str, Any]) -> CanvasObject:
    stored = expand_changes(shape, changes)
    if not stored:
        logger.debug("No-op update for %s", shape.id)
        return shape
    return await ctx.store.update_shape(ctx.canvas_id, shape.id, stored)


@tool(name="update_shape", args=UpdateShapeArgs, category="modify")
async def update_shape(args: UpdateShapeArgs, ctx: ExecutionContext) -> ActionResult:
    """Change any subset of one shape's style, size or content."""
    shape = await ctx.store.get_shape(ctx.canvas_id, args.shape_id)
    changes = args.changes()
    await apply_changes(ctx, shape, changes)
    fields = ", ".join(sorted(changes)) or "nothing"
    return ActionResult([shape.id], f"Updated {shape.id} ({fields})")


@tool(name="move_shape", args=MoveShapeArgs, category="modify")
async def move_shape(args: MoveShapeArgs, ctx: ExecutionContext) -> ActionResult:
    """Move one shape so its top-left corner lands at (x, y)."""
    shape = await ctx.store.get_shape(ctx.canvas_id, args.shape_id)
    if args.x is None and args.y is None:
        return ActionResult([shape.id], f"{shape.id} left in place")
    await ctx.store.update_shape(ctx.canvas_id, shape.id, move_changes(shape, args.x, args.y))
    return ActionResult([shape.id], f"Moved {shape.id}")


@tool(name="resize_shape", args=ResizeShapeArgs, category="modify")
async def resize_shape(args: ResizeShapeArgs, ctx: ExecutionContext) -> ActionResult:
    """Set one shape's width and/or height."""
    shape = await ctx.store.get_shape(ctx.canvas_id, args.shape_id)
    changes = resize_changes(shape, args.width, args.height)
    if changes:
        await ctx.store.update_shape(ctx.canvas_id, shape.id, changes)
    return ActionResult([shape.id], f"Resized {shape.id}")


@tool(name="rotate_shape", args=RotateShapeArgs, category="modify")
async def rotate_shape(args: RotateShapeArgs, ctx: ExecutionContext) -> ActionResult:
    """Set one shape's absolute rotation in degrees."""
    await ctx.store.update_shape(ctx.canvas_id, args.shape_id, {"rotation": args.rotation})
    return ActionResult([args.shape_id], f"Rotated {args.shape_id} to {args.rotation:g}°")


@tool(name="delete_shape", args=DeleteShapeArgs, category="modify")
async def delete_shape(args: DeleteShapeArgs, ctx: ExecutionContext) -> ActionResult:
    """Delete one shape."""
    await ctx.store.delete_shape(ctx.canvas_id, args.shape_id)
    return ActionResult([], f"Deleted {args.shape_id}")
