"""FastAPI app factory."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from canvas_agent.config import settings
from canvas_agent.engine.errors import PlanError

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.canvas_agent_log_level.upper(), logging.DEBUG),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)


async def _plan_error_handler(request: Request, exc: PlanError) -> JSONResponse:
    return JSONResponse(status_code=422, content=exc.to_dict())


def create_app() -> FastAPI:
    app = FastAPI(
        title="Canvas Agent",
        description="Natural-language canvas agent: context minimization, plan validation and execution",
        version="0.1.0",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Import all tool modules so @tool decorators fire, then freeze
    from canvas_agent.engine.registry import build_registry

    build_registry()

    app.add_exception_handler(PlanError, _plan_error_handler)

    from canvas_agent.api.router import api_router

    app.include_router(api_router)

    return app


app = create_app()
