"""Configuration for the timer board and completion notifications.

All settings can be overridden via ``TIMERS_*`` environment variables.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class TimerConfig(BaseSettings):
    """Configuration for countdown ticking and notification delivery."""

    model_config = SettingsConfigDict(
        env_prefix="TIMERS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    tick_seconds: float = Field(
        default=1.0,
        gt=0.0,
        le=60.0,
        description="Wall-clock seconds between countdown ticks",
    )
    notifications_enabled: bool = Field(
        default=True,
        description="Whether completion notifications may be delivered",
    )
    webhook_url: str | None = Field(
        default=None,
        description="Optional URL receiving a JSON POST when a countdown completes",
    )
    webhook_timeout: float = Field(
        default=10.0,
        gt=0.0,
        description="Timeout in seconds for webhook delivery",
    )
