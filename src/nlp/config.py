"""Configuration for the utterance parser.

Uses Pydantic settings for environment-based configuration,
following the same pattern as other service configs in the project.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ParserConfig(BaseSettings):
    """
    Configuration for the natural-language event parser.

    All settings can be overridden via environment variables with PARSER_ prefix.
    Example: PARSER_FALLBACK_TIMER_SECONDS=600

    Attributes:
        pomodoro_seconds: Fixed length of a pomodoro session.
        fallback_timer_seconds: Length of the timer created when nothing
            else in the utterance is recognized.
    """

    model_config = SettingsConfigDict(
        env_prefix="PARSER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    pomodoro_seconds: int = Field(
        default=1500,
        ge=1,
        description="Length of a pomodoro session in seconds.",
    )
    fallback_timer_seconds: int = Field(
        default=300,
        ge=1,
        description="Length of the quick timer used for unrecognized input.",
    )
