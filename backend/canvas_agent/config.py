"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    anthropic_api_key: str = ""
    canvas_agent_env: str = "development"
    canvas_agent_log_level: str = "debug"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000", "http://localhost:5173"]

    # Planner model tiers
    model_cheap: str = "claude-haiku-4-5-20251001"
    model_mid: str = "claude-sonnet-4-5-20250929"
    model_frontier: str = "claude-sonnet-4-5-20250929"
    planner_max_tokens: int = 4096
    planner_temperature: float = 0.2

    # Canvas
    default_canvas_id: str = "default"
    max_shapes: int = 1000
    context_default_limit: int = 10

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
