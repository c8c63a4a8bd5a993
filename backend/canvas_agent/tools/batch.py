"""Batch tools: mixed create/update/delete lists and relative transforms over many shapes."""

from __future__ import annotations

import logging
from typing import Any

from canvas_agent.canvas.geometry import scale_changes, translate_changes
from canvas_agent.canvas.store import CanvasLimitError, ShapeNotFoundError
from canvas_agent.engine.context import ActionResult, ExecutionContext
from canvas_agent.engine.registry import tool
from canvas_agent.models.operations import (
    BatchOperation,
    BatchOperationsArgs,
    BatchUpdateShapesArgs,
    CreateOp,
    UpdateOp,
)
from canvas_agent.models.shapes import CanvasObject
from canvas_agent.tools.modify import expand_changes

logger = logging.getLogger(__name__)


async def _snapshot(ctx: ExecutionContext) -> dict[str, CanvasObject]:
    return {s.id: s for s in await ctx.store.list_shapes(ctx.canvas_id)}


def _plan_operations(
    args: BatchOperationsArgs,
    existing: dict[str, CanvasObject],
    max_shapes: int,
) -> list[tuple[BatchOperation, Any]]:
    """Work out every sub-operation against the snapshot before anything is stored.

    Returns (operation, seed or stored changes) pairs in order. Missing
    targets, changes a shape cannot take and a batch that would overflow the
    canvas all raise here, so a failing batch leaves the canvas untouched.
    """
    working = dict(existing)
    count = peak = len(working)
    planned: list[tuple[BatchOperation, Any]] = []
    for index, op in enumerate(args.operations, start=1):
        if isinstance(op, CreateOp):
            planned.append((op, op.shape.to_seed()))
            count += 1
            peak = max(peak, count)
            continue

        shape = working.get(op.shape_id)
        if shape is None:
            raise ShapeNotFoundError(f"{op.shape_id} (operation {index})")

        if isinstance(op, UpdateOp):
            try:
                stored = expand_changes(shape, op.updates.changes())
            except ValueError as e:
                raise ValueError(f"operation {index}: {e}") from e
            working[shape.id] = shape.model_copy(update=stored)
            planned.append((op, stored))
        else:
            del working[shape.id]
            count -= 1
            planned.append((op, None))

    if peak > max_shapes:
        raise CanvasLimitError(
            f"Canvas limit of {max_shapes} shapes exceeded by batch "
            f"({len(existing)} existing, {peak - len(existing)} more at its peak)"
        )
    return planned


@tool(name="batch_operations", args=BatchOperationsArgs, category="batch")
async def batch_operations(args: BatchOperationsArgs, ctx: ExecutionContext) -> ActionResult:
    """Apply an ordered list of create/update/delete sub-operations, all or nothing."""
    existing = await _snapshot(ctx)
    planned = _plan_operations(args, existing, ctx.store.max_shapes)

    affected: list[str] = []
    counts = {"create": 0, "update": 0, "delete": 0}
    for op, prepared in planned:
        if isinstance(op, CreateOp):
            (seed,) = ctx.stamp([prepared])
            shape = await ctx.store.create_shape(ctx.canvas_id, seed)
            affected.append(shape.id)
        elif isinstance(op, UpdateOp):
            if prepared:
                await ctx.store.update_shape(ctx.canvas_id, op.shape_id, prepared)
            affected.append(op.shape_id)
        else:
            await ctx.store.delete_shape(ctx.canvas_id, op.shape_id)
            if op.shape_id in affected:
                affected.remove(op.shape_id)
        counts[op.type] += 1

    summary = ", ".join(f"{n} {kind}" for kind, n in counts.items() if n)
    logger.debug("batch_operations on %s: %s", ctx.canvas_id, summary)
    return ActionResult(affected, f"Batch applied: {summary}")


def _relative_changes(shape: CanvasObject, args: BatchUpdateShapesArgs) -> dict[str, Any]:
    """Absolute updates first, then scale about the centre, then translate, then rotate."""
    changes: dict[str, Any] = expand_changes(shape, args.updates.changes()) if args.updates else {}

    if args.scale_x is not None or args.scale_y is not None:
        current = shape.model_copy(update=changes)
        changes.update(scale_changes(current, args.scale_x or 1.0, args.scale_y or 1.0))

    if args.delta_x or args.delta_y:
        current = shape.model_copy(update=changes)
        changes.update(translate_changes(current, args.delta_x or 0.0, args.delta_y or 0.0))

    if args.delta_rotation:
        changes["rotation"] = ((shape.rotation or 0.0) + args.delta_rotation) % 360

    return changes


@tool(name="batch_update_shapes", args=BatchUpdateShapesArgs, category="batch")
async def batch_update_shapes(args: BatchUpdateShapesArgs, ctx: ExecutionContext) -> ActionResult:
    """Apply the same updates, deltas and scale factors to every listed shape."""
    existing = await _snapshot(ctx)
    missing = [sid for sid in args.shape_ids if sid not in existing]
    if missing:
        raise ShapeNotFoundError(", ".join(missing))

    ids = list(dict.fromkeys(args.shape_ids))
    planned = {shape_id: _relative_changes(existing[shape_id], args) for shape_id in ids}
    for shape_id, changes in planned.items():
        if changes:
            await ctx.store.update_shape(ctx.canvas_id, shape_id, changes)
    return ActionResult(ids, f"Updated {len(ids)} shape(s)")
