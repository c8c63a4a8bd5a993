"""Canvas snapshot and seeding endpoints."""

from __future__ import annotations

import logging

import numpy as np
from fastapi import APIRouter, Depends, HTTPException

from canvas_agent.canvas.random_shapes import generate_random_shapes
from canvas_agent.canvas.store import CanvasLimitError, InMemoryCanvasStore
from canvas_agent.dependencies import get_store
from canvas_agent.models.requests import SeedShapesRequest
from canvas_agent.models.responses import ShapesResponse

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/canvas/{canvas_id}/shapes", response_model=ShapesResponse)
async def list_shapes(canvas_id: str, store: InMemoryCanvasStore = Depends(get_store)) -> ShapesResponse:
    shapes = await store.list_shapes(canvas_id)
    return ShapesResponse(canvas_id=canvas_id, count=len(shapes), shapes=shapes)


@router.post("/canvas/{canvas_id}/shapes", response_model=ShapesResponse, status_code=201)
async def seed_shapes(
    canvas_id: str,
    req: SeedShapesRequest,
    store: InMemoryCanvasStore = Depends(get_store),
) -> ShapesResponse:
    """Add explicit and/or random shapes directly, bypassing the planner."""
    if req.clear:
        await store.clear(canvas_id)

    seeds = list(req.shapes)
    if req.random_count:
        seeds += generate_random_shapes(req.random_count, req.types, rng=np.random.default_rng(req.seed))

    try:
        created = await store.create_shapes(canvas_id, seeds)
    except CanvasLimitError as e:
        raise HTTPException(status_code=409, detail=str(e)) from e

    logger.info("Seeded %d shape(s) on %s", len(created), canvas_id)
    shapes = await store.list_shapes(canvas_id)
    return ShapesResponse(canvas_id=canvas_id, count=len(shapes), shapes=created)
