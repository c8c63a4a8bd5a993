"""Task → model selection. Cheap models for classification and simple edits, frontier for creative work."""

from __future__ import annotations

from canvas_agent.config import settings

_TASK_MODEL_MAP = {
    "classify": "cheap",
    "simple": "cheap",
    "complex": "mid",
    "creative": "frontier",
}


def get_model_for_task(task: str) -> str:
    tier = _TASK_MODEL_MAP.get(task, "mid")
    if tier == "cheap":
        return settings.model_cheap
    elif tier == "mid":
        return settings.model_mid
    else:
        return settings.model_frontier
