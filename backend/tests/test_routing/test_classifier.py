"""Tests for planner-tier classification."""

import pytest

from canvas_agent.config import settings
from canvas_agent.routing import classifier
from canvas_agent.routing.heuristics import DIRECT_CLEAR


@pytest.mark.parametrize(
    "message, tier",
    [
        ("undo", classifier.SIMPLE),
        ("How many circles are there?", classifier.SIMPLE),
        ("create a red circle", classifier.SIMPLE),
        ("make it blue", classifier.SIMPLE),
        ("draw a smiley face", classifier.CREATIVE),
        ("design a pricing page", classifier.CREATIVE),
        ("create 10 circles in a grid", classifier.COMPLEX),
        ("arrange the rectangles evenly spaced", classifier.COMPLEX),
        ("paint the abyss", None),
    ],
)
def test_classify_by_rules(message, tier):
    assert classifier.classify_by_rules(message) == tier


@pytest.mark.asyncio
async def test_classify_falls_back_to_complex_without_key(monkeypatch):
    monkeypatch.setattr(settings, "anthropic_api_key", "")
    assert await classifier.classify("paint the abyss") == classifier.COMPLEX
    assert await classifier.classify("draw a smiley face") == classifier.CREATIVE


@pytest.mark.asyncio
async def test_classify_without_llm():
    assert await classifier.classify("paint the abyss", use_llm=False) == classifier.COMPLEX


def test_route():
    assert classifier.route("clear") == DIRECT_CLEAR
    assert isinstance(classifier.route("clear and add a circle"), list)
    assert classifier.route("draw a house") is None
