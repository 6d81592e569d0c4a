"""Application settings using pydantic-settings."""

from __future__ import annotations

from typing import Literal

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from redis_tui_core.constants import DIAGNOSTICS_BUFFER_SIZE, KEY_CACHE_TTL_SECONDS


class Settings(BaseSettings):
    """Process-level configuration for redis-tui.

    Connection parameters are resolved separately into a ``ConnectionConfig``;
    this only carries the environment-sourced URL and ambient knobs.
    """

    model_config = SettingsConfigDict(env_prefix="REDIS_TUI_", env_file=".env", extra="ignore")

    # --- Connection ---
    redis_url: str | None = Field(
        default=None,
        validation_alias=AliasChoices("REDIS_URL", "REDIS_TUI_REDIS_URL"),
        description="Connection URL used as the base for flag overrides",
    )

    # --- Logging ---
    log_level: str = Field(
        default="WARNING",
        description="Log level: DEBUG, INFO, WARNING, ERROR, CRITICAL",
    )
    log_format: Literal["console", "json"] = Field(
        default="console",
        description="Log output format",
    )

    # --- Session ---
    diagnostics_buffer_size: int = Field(
        default=DIAGNOSTICS_BUFFER_SIZE,
        ge=1,
        description="Maximum pending diagnostics before the oldest are dropped",
    )
    key_cache_ttl_seconds: float = Field(
        default=KEY_CACHE_TTL_SECONDS,
        gt=0,
        description="How long a sampled key listing is served from cache",
    )
