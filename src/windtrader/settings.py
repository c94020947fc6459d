"""Settings loaded from ``WINDTRADER_*`` environment variables."""

from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration for the windtrader CLI.

    Values are read from environment variables only; the command line
    stays limited to the three commands.
    """

    model_config = SettingsConfigDict(
        env_prefix="WINDTRADER_",
        extra="ignore",
    )

    # Diagnostic logging on stderr.  WARNING keeps successful runs silent.
    log_level: str = "WARNING"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the cached settings instance."""
    return Settings()
