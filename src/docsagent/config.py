"""Application configuration.

Configuration is loaded from environment variables. For local development, you can provide a
`.env` file and set `DOCSAGENT_ENV_FILE` to point to it.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """docsagent settings.

    All fields are environment-configurable. Prefix is `DOCSAGENT_`.
    """

    model_config = SettingsConfigDict(
        env_prefix="DOCSAGENT_",
        env_file=None,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Core
    app_env: Literal["dev", "prod"] = Field(default="dev")
    log_level: str = Field(default="INFO")

    # LLM (any OpenAI-compatible endpoint, e.g. Groq via openai_base_url)
    openai_api_key: str | None = Field(default=None)
    openai_base_url: str | None = Field(default=None)
    openai_model: str = Field(default="openai/gpt-oss-120b")
    openai_timeout_s: float = Field(default=120.0)

    # Token budgets; outlines are structurally small
    max_completion_tokens: int = Field(default=16384, ge=256)
    outline_max_tokens: int = Field(default=4096, ge=256)

    # Outline planning
    outline_min_sections: int = Field(default=8, ge=1, le=50)
    outline_max_sections: int = Field(default=12, ge=1, le=50)

    # Pacing between provider calls (fixed, not backoff)
    delay_after_outline_s: float = Field(default=2.0, ge=0.0, le=60.0)
    delay_between_sections_s: float = Field(default=3.0, ge=0.0, le=60.0)

    # Jobs
    job_ttl_s: float = Field(default=30 * 60, gt=0)
    serialize_job_pulls: bool = Field(default=False)

    # Rolling summary
    summary_blocks_per_section: int = Field(default=2, ge=1, le=10)
    summary_snippet_chars: int = Field(default=150, ge=10, le=2000)

    # Conversation memory
    memory_backend: Literal["memory", "redis"] = Field(default="memory")
    redis_url: str = Field(default="redis://localhost:6379/0")
    redis_key_prefix: str = Field(default="docsagent")
    memory_ttl_s: int = Field(default=60 * 60 * 24 * 7, ge=60)
    # 0 keeps the whole history
    history_max_turns: int = Field(default=0, ge=0)


def load_settings() -> Settings:
    """Load settings from env.

    Returns:
        Settings: Parsed settings.
    """

    env_file_override = os.getenv("DOCSAGENT_ENV_FILE")
    if env_file_override:
        env_path = Path(env_file_override)
        return Settings(_env_file=env_path)

    default_env = Path.cwd() / ".env"
    if default_env.exists():
        return Settings(_env_file=default_env)

    return Settings()
