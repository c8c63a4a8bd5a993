"""LLM planner: instruction + minimized canvas context -> Plan, via LangChain ChatAnthropic."""

from __future__ import annotations

import json
import logging
import re
import time

from pydantic import ValidationError

from canvas_agent.config import settings
from canvas_agent.context.minimizer import build_context
from canvas_agent.context.style import StyleProfile
from canvas_agent.engine.registry import ToolRegistry
from canvas_agent.llm.model_router import get_model_for_task
from canvas_agent.llm.prompts import build_system_prompt, build_user_message
from canvas_agent.models.plan import Plan
from canvas_agent.models.shapes import CanvasObject

logger = logging.getLogger(__name__)

NOT_CONFIGURED = "[LLM not configured: set ANTHROPIC_API_KEY in .env]"

_prompt_cache: dict[int, str] = {}


def _system_prompt(registry: ToolRegistry) -> str:
    # Frozen registries never change, so one prompt per registry instance
    key = id(registry)
    if key not in _prompt_cache:
        _prompt_cache[key] = build_system_prompt(registry)
    return _prompt_cache[key]


def parse_plan(text: str) -> tuple[Plan | None, str | None]:
    """Parse LLM output as a Plan. Returns (Plan, None) or (None, error_msg)."""
    cleaned = re.sub(r"^```(?:json)?\s*\n?", "", text.strip())
    cleaned = re.sub(r"\n?```\s*$", "", cleaned)
    cleaned = cleaned.strip()

    # Tolerate a "REASONING: ... PLAN:" preamble or other surrounding text
    json_match = re.search(r"\{[\s\S]*\}", cleaned)
    if json_match:
        cleaned = json_match.group(0)

    try:
        data = json.loads(cleaned)
        return Plan.model_validate(data), None
    except (json.JSONDecodeError, ValidationError, TypeError) as e:
        return None, str(e)


async def generate_plan(
    instruction: str,
    shapes: list[CanvasObject],
    registry: ToolRegistry,
    tier: str = "complex",
    style: StyleProfile | None = None,
) -> tuple[Plan | None, str | None]:
    """Ask the model for a plan. Returns (None, reason) when unconfigured or unparseable."""
    if not settings.anthropic_api_key:
        return None, NOT_CONFIGURED

    from langchain_anthropic import ChatAnthropic
    from langchain_core.messages import HumanMessage, SystemMessage

    model_id = get_model_for_task(tier)
    llm = ChatAnthropic(
        model=model_id,
        api_key=settings.anthropic_api_key,
        max_tokens=settings.planner_max_tokens,
        temperature=settings.planner_temperature,
    )

    canvas_context = build_context(instruction, shapes, True, settings.context_default_limit)
    messages = [
        SystemMessage(content=_system_prompt(registry)),
        HumanMessage(content=build_user_message(instruction, canvas_context, style.to_prompt() if style else "")),
    ]

    t0 = time.perf_counter()
    response = await llm.ainvoke(messages)
    logger.info("Planner (%s, %s): %.0fms", tier, model_id, (time.perf_counter() - t0) * 1000)

    plan, error = parse_plan(str(response.content))
    if plan is None:
        logger.warning("Planner output was not a valid plan: %s", error)
    else:
        logger.debug("Planner produced %d step(s)", len(plan.steps))
    return plan, error
