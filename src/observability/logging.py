"""
Structured logging for the scheduler.

Parser and timer modules log through the standard library
(``logging.getLogger(__name__)``); structlog renders those records together
with the CLI's own structured events. Countdown runs bind the event id so
every line emitted while an event is live can be traced back to it.
"""

import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager

import structlog
from structlog.types import Processor

from src.config.settings import Settings, get_settings

# Chatty third-party loggers kept at WARNING regardless of the app level
_QUIET_LOGGERS = ("httpx", "httpcore", "asyncio")

_HANDLER_NAME = "smart-scheduler"


def _use_json(settings: Settings) -> bool:
    if settings.log_format == "auto":
        return settings.is_production
    return settings.log_format == "json"


def _shared_processors() -> list[Processor]:
    """Run on structlog events and on foreign stdlib records alike."""
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]


def build_formatter(settings: Settings) -> structlog.stdlib.ProcessorFormatter:
    """
    Formatter rendering every record on the handler through structlog.

    Records from ``logging.getLogger(__name__)`` loggers go through the
    shared processors first, so they carry the same level, logger name,
    timestamp and bound context as structlog events.
    """
    processors: list[Processor] = [
        structlog.stdlib.ProcessorFormatter.remove_processors_meta,
    ]
    if _use_json(settings):
        processors += [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(ensure_ascii=False),
        ]
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=settings.log_colors))
    return structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=_shared_processors(),
        processors=processors,
    )


def setup_logging(level: str | None = None) -> None:
    """
    Configure structured logging.

    Output goes to stderr so that ``parse --json`` keeps stdout clean.
    Calling it again replaces the previously installed handler.

    Args:
        level: Overrides ``Settings.log_level`` (the CLI's ``--debug``).

    Usage:
        setup_logging()
        logger = get_logger(__name__)
        logger.info("Countdown finished", event_id="...", deliveries=[("log", True)])
    """
    settings = get_settings()
    level_name = level or settings.log_level

    structlog.configure(
        processors=[
            *_shared_processors(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(build_formatter(settings))

    root = logging.getLogger()
    for existing in list(root.handlers):
        if existing.get_name() == _HANDLER_NAME:
            root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(getattr(logging, level_name))

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structured logger, named after the calling module by convention."""
    return structlog.get_logger(name)


def bind_context(**kwargs) -> None:
    """Attach fields to every subsequent log line in this context."""
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    """Drop all fields attached with bind_context."""
    structlog.contextvars.clear_contextvars()


@contextmanager
def event_context(event_id: str, **kwargs) -> Iterator[None]:
    """
    Tag log lines with an active event's id for the duration of the block.

    Usage:
        with event_context(active.event_id, event_type="timer"):
            run_countdown()
    """
    bind_context(event_id=event_id, **kwargs)
    try:
        yield
    finally:
        clear_context()
