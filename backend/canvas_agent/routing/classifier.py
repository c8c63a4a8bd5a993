"""Request complexity classification: which planner tier an instruction needs.

Regex tiers run first; only instructions none of them recognise go to the
cheap model, and without an API key those default to ``complex``.
"""

from __future__ import annotations

import logging
import re
import time

from canvas_agent.config import settings
from canvas_agent.routing.heuristics import check_heuristic, compound_heuristics

logger = logging.getLogger(__name__)

SIMPLE = "simple"
CREATIVE = "creative"
COMPLEX = "complex"
TIERS = (SIMPLE, CREATIVE, COMPLEX)

_QUESTION_PREFIXES = ("what", "how many", "which", "where", "tell me", "show me")

_SINGLE_SHAPE = [
    re.compile(r"^(create|add|make|draw)\s+(a|an|the)?\s*\w+\s+(circle|rectangle|square|text|line)"),
    re.compile(r"^(move|delete|remove)\s+(the|this|that)?\s*\w+"),
    re.compile(r"^(change|make|set)\s+(it|the|this)?\s*(to|into)?\s*\w+"),
    re.compile(r"^(double|triple|halve)\s+(the\s+)?(size|radius|width|height)"),
]
_HAS_NUMBER = re.compile(r"\d+")
_HAS_MULTIPLE = re.compile(r"(and|then|after|multiple|all|every)")

_PROPERTY_UPDATE = [
    re.compile(r"^(make|change|set|turn)\s+(it|the|this|that)?\s+(red|green|blue|yellow|orange|purple|pink|black|white)"),
    re.compile(r"^(make|set)\s+(it|the|this|that)?\s+(bigger|smaller|larger|tiny|huge)"),
    re.compile(r"^(change|update|set)\s+the\s+(color|size|position|rotation|opacity)"),
    re.compile(r"^(move|put)\s+(it|the|this|that)?\s+to\s+(the\s+)?(center|top|bottom|left|right)"),
]

_CREATIVE = [
    re.compile(r"(draw|create|make|design)\s+(a\s+|an\s+)?(sunset|galaxy|face|tree|house|flower|sun|moon|star|smiley|emoji)"),
    re.compile(r"(draw|create|make|design)\s+(a|an)?\s*(beautiful|pretty|cool|awesome|amazing|artistic)"),
    re.compile(r"(create|make)\s+(art|abstract|composition|pattern|design)"),
    re.compile(r"(draw|paint|sketch|design|create)\s+(something|anything)\s+(beautiful|pretty|cool|nice|amazing)"),
    re.compile(r"(face|smiley|emoji|person|stick\s+figure|character)"),
    re.compile(r"(tree|flower|plant|\bsun\b|moon|\bstar\b|nature|landscape)"),
    re.compile(r"(house|building|\bcar\b|vehicle|boat|ship|architecture)"),
    re.compile(r"(form|login|signup|register|sign\s+in|sign\s+up)"),
    re.compile(r"(button|input|\bcard\b|panel|modal|dialog)"),
    re.compile(r"(dashboard|layout|screen|interface|\bui\b|page)"),
    re.compile(r"(navbar|sidebar|menu|header|footer)"),
    re.compile(r"(profile|settings|checkout|contact|pricing)"),
]

_COMPLEX = [
    re.compile(r"\d+\s+(circles|rectangles|squares|shapes|lines|text)"),
    re.compile(r"(grid|row|column|pattern|arrange|align|distribute)"),
    re.compile(r"(all\s+\w+\s+(circles|rectangles|shapes))"),
    re.compile(r"(\d+x\d+)"),
    re.compile(r"(evenly|equally)\s+(spaced|distributed)"),
    re.compile(r"(between|from)\s+\d+\s+(to|and)\s+\d+"),
]

_CLASSIFY_PROMPT = """Classify as "simple", "creative", or "complex":
"{message}"

**Simple**: Single shape operation, question, basic property update
**Creative**: Composite objects (face, tree, house, person), UI layouts (form, button, dashboard), requires imagination and spatial reasoning
**Complex**: Large batches (10+ shapes), patterns (grids, rows), calculations, filtering, spatial distributions

Answer with ONE WORD ONLY."""


def classify_by_rules(message: str) -> str | None:
    """Tier from the regex rules alone, or None when they do not decide."""
    lower = message.strip().lower()

    if lower in ("undo", "redo", "undo canvas", "redo canvas"):
        return SIMPLE
    if lower.startswith(_QUESTION_PREFIXES):
        return SIMPLE
    if any(p.search(lower) for p in _SINGLE_SHAPE):
        if not _HAS_NUMBER.search(lower) and not _HAS_MULTIPLE.search(lower):
            return SIMPLE
    if any(p.search(lower) for p in _PROPERTY_UPDATE):
        return SIMPLE
    if any(p.search(lower) for p in _CREATIVE):
        return CREATIVE
    if any(p.search(lower) for p in _COMPLEX):
        return COMPLEX
    return None


async def _classify_with_llm(message: str) -> str:
    from langchain_anthropic import ChatAnthropic
    from langchain_core.messages import HumanMessage

    from canvas_agent.llm.model_router import get_model_for_task

    llm = ChatAnthropic(
        model=get_model_for_task("classify"),
        api_key=settings.anthropic_api_key,
        max_tokens=8,
        temperature=0,
    )
    response = await llm.ainvoke([HumanMessage(content=_CLASSIFY_PROMPT.format(message=message))])
    answer = str(response.content).strip().lower().strip(".\"'")
    return answer if answer in (CREATIVE, COMPLEX) else SIMPLE


async def classify(message: str, use_llm: bool = True) -> str:
    """Planner tier (``simple`` / ``creative`` / ``complex``) for a non-direct instruction."""
    start = time.perf_counter()
    tier = classify_by_rules(message)
    if tier is not None:
        logger.debug("Classifier: %s by rules (%.1fms)", tier, (time.perf_counter() - start) * 1000)
        return tier

    if not use_llm or not settings.anthropic_api_key:
        return COMPLEX

    try:
        tier = await _classify_with_llm(message)
    except Exception as e:
        logger.warning("LLM classification failed, defaulting to complex: %s", e)
        return COMPLEX
    logger.debug("Classifier: %s by LLM (%.0fms)", tier, (time.perf_counter() - start) * 1000)
    return tier


def route(message: str) -> str | list[tuple[str, str]] | None:
    """Direct-execution routing: a heuristic kind, compound (command, kind) pairs, or None."""
    compound = compound_heuristics(message)
    if compound is not None:
        return compound
    return check_heuristic(message)
