"""
Live countdown board and completion notifications.

Consumes ParsedEvent values produced by ``src.nlp`` and owns everything
that happens after parsing.

Components:
- TimerConfig: Configuration for ticking and notifications
- ActiveEvent: A parsed event with countdown state
- TimerBoard: In-memory collection driving pause/resume/reset/tick
- NotificationDispatcher: Fans completion notices out to channels
"""

from src.timers.board import EventNotFoundError, TimerBoard
from src.timers.channels import (
    ConsoleChannel,
    LogChannel,
    NotificationChannel,
    WebhookChannel,
)
from src.timers.config import TimerConfig
from src.timers.dispatcher import NotificationDispatcher
from src.timers.schemas import ActiveEvent

__all__ = [
    "ActiveEvent",
    "ConsoleChannel",
    "EventNotFoundError",
    "LogChannel",
    "NotificationChannel",
    "NotificationDispatcher",
    "TimerBoard",
    "TimerConfig",
    "WebhookChannel",
]
