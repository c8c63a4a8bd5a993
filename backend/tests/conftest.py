"""Shared test fixtures."""

from __future__ import annotations

import numpy as np
import pytest

from canvas_agent.canvas.store import InMemoryCanvasStore
from canvas_agent.engine.context import ExecutionContext
from canvas_agent.engine.executor import PlanExecutor
from canvas_agent.engine.registry import build_registry
from canvas_agent.models.shapes import CanvasObject

CANVAS_ID = "test-canvas"


def make_shape(shape_id: str, shape_type: str = "rectangle", **kwargs) -> CanvasObject:
    defaults = {"x": 100.0, "y": 100.0, "width": 100.0, "height": 100.0, "fill": "#cccccc"}
    defaults.update(kwargs)
    return CanvasObject(id=shape_id, type=shape_type, **defaults)


def make_shapes(count: int, shape_type: str = "rectangle") -> list[CanvasObject]:
    return [make_shape(f"shape_{i}", shape_type, x=float(i * 10)) for i in range(count)]


# A small mixed canvas used across context and routing tests
MIXED_SHAPES = [
    make_shape("c_red", "circle", fill="#FF0000", x=400, y=400, width=100, height=100),
    make_shape("c_blue", "circle", fill="#0000FF", x=800, y=400, width=60, height=60),
    make_shape("r_blue", "rectangle", fill="#0000ff", x=1200, y=400, width=200, height=80),
    make_shape("t_hello", "text", fill="#000000", text="Hello", font_size=24, x=100, y=900, width=72, height=28.8),
    make_shape("l_green", "line", fill="#00FF00", x=100, y=1200, width=300, height=0, points=[100, 1200, 400, 1200]),
]


@pytest.fixture
def store() -> InMemoryCanvasStore:
    return InMemoryCanvasStore()


@pytest.fixture
def ctx(store: InMemoryCanvasStore) -> ExecutionContext:
    return ExecutionContext(canvas_id=CANVAS_ID, store=store, rng=np.random.default_rng(42))


@pytest.fixture(scope="session")
def registry():
    return build_registry()


@pytest.fixture
def executor(registry) -> PlanExecutor:
    return PlanExecutor(registry)
