"""Canvas agent: natural-language instruction -> plan -> executed results.

Routing order, cheapest first:
1. direct heuristics ("clear", "move everything up 50", "add a red circle"),
   including compounds whose every part is direct
2. template fast path for plain login / navbar / card requests
3. the LLM planner, at the tier the classifier picks
"""

from __future__ import annotations

import logging
import time
from typing import Literal

from pydantic import Field

from canvas_agent.context.style import infer_style
from canvas_agent.engine.context import ExecutionContext
from canvas_agent.engine.executor import PlanExecutor
from canvas_agent.llm.planner import generate_plan
from canvas_agent.models.base import CamelModel
from canvas_agent.models.plan import Plan, PlanStep, StepResult
from canvas_agent.routing.classifier import classify, route
from canvas_agent.routing.direct import direct_plan
from canvas_agent.templates.catalog import detect_template

logger = logging.getLogger(__name__)

Source = Literal["direct", "compound", "template", "planner", "none"]


class AgentResult(CamelModel):
    plan: Plan = Field(default_factory=Plan)
    results: list[StepResult] = Field(default_factory=list)
    source: Source = "none"
    message: str = ""


class CanvasAgent:
    def __init__(self, executor: PlanExecutor, use_llm: bool = True) -> None:
        self.executor = executor
        self.use_llm = use_llm

    async def run(self, instruction: str, ctx: ExecutionContext, user_id: str | None = None) -> AgentResult:
        start = time.perf_counter()
        logger.info("Agent: %r on canvas %s", instruction, ctx.canvas_id)

        routed = route(instruction)
        if isinstance(routed, list):
            result = await self._run_compound(routed, ctx)
        elif routed is not None:
            result = await self._run_direct(instruction, routed, ctx)
        else:
            result = await self._run_planned(instruction, ctx, user_id)

        logger.info(
            "Agent done via %s: %d step(s) in %.0fms",
            result.source,
            len(result.results),
            (time.perf_counter() - start) * 1000,
        )
        return result

    async def _shape_ids(self, ctx: ExecutionContext) -> list[str]:
        return [s.id for s in await ctx.store.list_shapes(ctx.canvas_id)]

    async def _run_direct(self, command: str, kind: str, ctx: ExecutionContext) -> AgentResult:
        plan = direct_plan(command, kind, await self._shape_ids(ctx))
        if plan is None:
            return AgentResult(source="direct", message="There are no shapes on the canvas to transform.")
        results = await self.executor.execute(plan, ctx)
        return AgentResult(plan=plan, results=results, source="direct", message=plan.reasoning)

    async def _run_compound(self, commands: list[tuple[str, str]], ctx: ExecutionContext) -> AgentResult:
        # Each part sees the canvas the previous part left behind
        steps: list[PlanStep] = []
        results: list[StepResult] = []
        messages: list[str] = []
        for command, kind in commands:
            part = await self._run_direct(command, kind, ctx)
            offset = len(steps)
            steps.extend(s.model_copy(update={"step": s.step + offset}) for s in part.plan.steps)
            results.extend(r.model_copy(update={"step": r.step + offset}) for r in part.results)
            messages.append(part.message)
        message = " ".join(m for m in messages if m)
        return AgentResult(plan=Plan(plan=steps, reasoning=message), results=results, source="compound", message=message)

    async def _run_planned(self, instruction: str, ctx: ExecutionContext, user_id: str | None) -> AgentResult:
        shapes = await ctx.store.list_shapes(ctx.canvas_id)
        style = infer_style([s for s in shapes if s.created_by == user_id]) if user_id else None

        template = detect_template(instruction)
        if template is not None:
            args = template.to_args(template.extract(instruction, style))
            label = template.name.replace("_", " ")
            plan = Plan(
                plan=[PlanStep(step=1, tool=template.tool, args=args, description=f"Create {label}")],
                reasoning=f"Done! I've created a {label}.",
            )
            results = await self.executor.execute(plan, ctx)
            message = results[-1].message or plan.reasoning
            return AgentResult(plan=plan, results=results, source="template", message=message)

        tier = await classify(instruction, use_llm=self.use_llm)
        plan, error = await generate_plan(
            instruction,
            shapes,
            self.executor.registry,
            tier=tier,
            style=style if tier == "creative" else None,
        )
        if plan is None:
            return AgentResult(source="planner", message=error or "No plan produced")

        results = await self.executor.execute(plan, ctx)
        return AgentResult(plan=plan, results=results, source="planner", message=plan.reasoning)


async def run_command(
    instruction: str,
    ctx: ExecutionContext,
    executor: PlanExecutor,
    user_id: str | None = None,
    use_llm: bool = True,
) -> AgentResult:
    return await CanvasAgent(executor, use_llm=use_llm).run(instruction, ctx, user_id)
