"""Library configuration via environment variables with NUMSCAN_ prefix."""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

LocaleCode = Literal["US", "UK", "DE", "FR", "IN", "CN"]


class Settings(BaseSettings):
    """numscan configuration.

    All settings are read from environment variables prefixed with ``NUMSCAN_``.
    """

    model_config = SettingsConfigDict(env_prefix="NUMSCAN_")

    # ── Logging ─────────────────────────────────────────────────────────────
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    log_json: bool = True

    # ── Parsing ─────────────────────────────────────────────────────────────
    default_locale: LocaleCode = "US"
    # None means the outer parser examines the whole buffer
    max_search_length: int | None = Field(default=None, ge=1)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the process-wide settings instance."""
    return Settings()
