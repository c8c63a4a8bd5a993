"""Sequential plan executor: resolve -> look up -> validate -> act, one step at a time."""

from __future__ import annotations

import logging
import time

from canvas_agent.engine.context import ExecutionContext
from canvas_agent.engine.errors import ActionFailedError, PlanError, UnknownOperationError
from canvas_agent.engine.registry import ToolRegistry
from canvas_agent.engine.resolver import check_references, resolve
from canvas_agent.engine.validation import validate
from canvas_agent.models.plan import Plan, StepResult

logger = logging.getLogger(__name__)


class PlanExecutor:
    """Runs plans against a canvas using a frozen tool registry.

    Steps run strictly in list order. The first failure stops the plan and is
    raised as a PlanError naming the step; earlier steps stay applied.
    """

    def __init__(self, registry: ToolRegistry) -> None:
        self.registry = registry

    async def execute(self, plan: Plan, ctx: ExecutionContext) -> list[StepResult]:
        start = time.perf_counter()
        logger.info("Plan: %d step(s) queued on canvas %s", len(plan.steps), ctx.canvas_id)

        check_references(plan)

        results: list[StepResult] = []
        for ordinal, step in enumerate(plan.steps, start=1):
            t0 = time.perf_counter()
            try:
                result = await self._run_step(ordinal, step.tool, step.args, results, ctx)
            except PlanError as e:
                logger.warning("  step %d (%s) FAILED: %s", ordinal, step.tool, e.cause)
                raise
            results.append(result)
            elapsed = (time.perf_counter() - t0) * 1000
            logger.debug("  step %d (%s) -> %d id(s) in %.1fms", ordinal, step.tool, len(result.shape_ids), elapsed)

        total = (time.perf_counter() - start) * 1000
        logger.info("Plan complete: %d/%d steps in %.0fms", len(results), len(plan.steps), total)
        return results

    async def _run_step(
        self,
        ordinal: int,
        tool_name: str,
        args: dict,
        results: list[StepResult],
        ctx: ExecutionContext,
    ) -> StepResult:
        resolved = resolve(args, results, ordinal)

        spec = self.registry.lookup(tool_name)
        if spec is None:
            raise UnknownOperationError(ordinal, tool_name)

        validated = validate(tool_name, resolved, self.registry, step=ordinal)

        # The action sees typed arguments; `tool` only served the validation
        try:
            outcome = await spec.action(validated, ctx)
        except PlanError:
            raise
        except Exception as e:
            raise ActionFailedError(ordinal, str(e)) from e

        return StepResult(step=ordinal, tool=tool_name, shape_ids=outcome.shape_ids, message=outcome.message)


def create_executor(registry: ToolRegistry | None = None) -> PlanExecutor:
    """Factory bound to the app-wide frozen registry unless one is given."""
    from canvas_agent.engine.registry import build_registry

    return PlanExecutor(registry or build_registry())
