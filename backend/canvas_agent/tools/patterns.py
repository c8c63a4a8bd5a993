"""Layout pattern generators: grids, rows of rectangles, rows of circles."""

from __future__ import annotations

from canvas_agent.canvas.geometry import circle_box
from canvas_agent.engine.context import ActionResult, ExecutionContext
from canvas_agent.engine.registry import tool
from canvas_agent.models.operations import CreateCircleRowArgs, CreateGridArgs, CreateRowArgs
from canvas_agent.models.shapes import ShapeSeed


async def _create_all(ctx: ExecutionContext, seeds: list[ShapeSeed], label: str) -> ActionResult:
    shapes = await ctx.store.create_shapes(ctx.canvas_id, ctx.stamp(seeds))
    return ActionResult([s.id for s in shapes], f"Created {label} ({len(shapes)} shapes)")


def grid_seeds(args: CreateGridArgs) -> list[ShapeSeed]:
    """Row-major cells; (start_x, start_y) is the top-left of the first cell."""
    step_x = args.cell_width + args.spacing
    step_y = args.cell_height + args.spacing
    return [
        ShapeSeed(
            type="rectangle",
            x=args.start_x + col * step_x,
            y=args.start_y + row * step_y,
            width=args.cell_width,
            height=args.cell_height,
            fill=args.fill,
        )
        for row in range(args.rows)
        for col in range(args.cols)
    ]


def row_seeds(args: CreateRowArgs) -> list[ShapeSeed]:
    step = args.width + args.spacing
    return [
        ShapeSeed(
            type="rectangle",
            x=args.start_x + i * step,
            y=args.start_y,
            width=args.width,
            height=args.height,
            fill=args.fill,
        )
        for i in range(args.count)
    ]


def circle_row_seeds(args: CreateCircleRowArgs) -> list[ShapeSeed]:
    step = 2 * args.radius + args.spacing
    return [
        ShapeSeed(type="circle", fill=args.fill, **circle_box(args.start_x + i * step, args.start_y, args.radius))
        for i in range(args.count)
    ]


@tool(name="create_grid", args=CreateGridArgs, category="pattern")
async def create_grid(args: CreateGridArgs, ctx: ExecutionContext) -> ActionResult:
    """Create a rows x cols grid of equal rectangles."""
    return await _create_all(ctx, grid_seeds(args), f"{args.rows}x{args.cols} grid")


@tool(name="create_row", args=CreateRowArgs, category="pattern")
async def create_row(args: CreateRowArgs, ctx: ExecutionContext) -> ActionResult:
    """Create a horizontal row of equal rectangles."""
    return await _create_all(ctx, row_seeds(args), f"row of {args.count}")


@tool(name="create_circle_row", args=CreateCircleRowArgs, category="pattern")
async def create_circle_row(args: CreateCircleRowArgs, ctx: ExecutionContext) -> ActionResult:
    """Create a horizontal row of equal circles."""
    return await _create_all(ctx, circle_row_seeds(args), f"row of {args.count} circles")
