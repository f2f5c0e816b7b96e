"""Environment-driven configuration helpers for the win probability viewer."""

from __future__ import annotations

from datetime import date
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_STATSAPI_BASE_URL = "https://statsapi.mlb.com/api/v1"


class Settings(BaseSettings):
    """Runtime configuration loaded from ``WINPROB_*`` environment variables."""

    model_config = SettingsConfigDict(env_prefix="WINPROB_", extra="ignore")

    statsapi_base_url: str = Field(default=DEFAULT_STATSAPI_BASE_URL)
    bootstrap_date: date | None = Field(default=None)
    log_level: str = Field(default="INFO")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached application settings."""

    return Settings()  # type: ignore[call-arg]


def get_start_date() -> date:
    """Return the date the session opens on: the configured override or today."""

    return get_settings().bootstrap_date or date.today()
