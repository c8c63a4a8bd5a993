"""Template tools: each expands to many primitive shapes in one store call."""

from __future__ import annotations

from canvas_agent.engine.context import ActionResult, ExecutionContext
from canvas_agent.engine.registry import tool
from canvas_agent.models.operations import CardTemplateArgs, LoginTemplateArgs, NavbarTemplateArgs
from canvas_agent.templates.catalog import get_template, render


async def _use_template(args, ctx: ExecutionContext) -> ActionResult:
    template = get_template(args.tool)
    shapes = await ctx.store.list_shapes(ctx.canvas_id)
    rendered = render(template, args.model_dump(exclude={"tool"}, exclude_none=True), shapes, ctx.viewport)
    created = await ctx.store.create_shapes(ctx.canvas_id, ctx.stamp(rendered.seeds))
    return ActionResult([s.id for s in created], f"Created {rendered.description}")


@tool(name="use_login_template", args=LoginTemplateArgs, category="template")
async def use_login_template(args: LoginTemplateArgs, ctx: ExecutionContext) -> ActionResult:
    """Create a complete login form (card, fields, submit button, optional social sign-in)."""
    return await _use_template(args, ctx)


@tool(name="use_navbar_template", args=NavbarTemplateArgs, category="template")
async def use_navbar_template(args: NavbarTemplateArgs, ctx: ExecutionContext) -> ActionResult:
    """Create a 1200px navigation bar with brand and menu items."""
    return await _use_template(args, ctx)


@tool(name="use_card_template", args=CardTemplateArgs, category="template")
async def use_card_template(args: CardTemplateArgs, ctx: ExecutionContext) -> ActionResult:
    """Create a content card with image placeholder, title, description and button."""
    return await _use_template(args, ctx)
