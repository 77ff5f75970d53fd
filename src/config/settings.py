"""Process-wide settings for smart-scheduler, loaded from the environment."""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Settings shared by every command.

    Unprefixed environment variables (``ENVIRONMENT``, ``LOG_LEVEL``,
    ``LOG_FORMAT``). Parser and timer knobs are separate, under the
    ``PARSER_`` and ``TIMERS_`` prefixes.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    environment: Literal["development", "staging", "production"] = "development"
    debug: bool = False

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    log_format: Literal["auto", "console", "json"] = Field(
        default="auto",
        description="'auto' renders JSON in production and console output elsewhere",
    )
    log_colors: bool = True

    @property
    def is_production(self) -> bool:
        return self.environment == "production"


@lru_cache
def get_settings() -> Settings:
    """Settings loaded once per process; call ``get_settings.cache_clear()`` to reload."""
    return Settings()
