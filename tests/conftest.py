"""Pytest fixtures for smart-scheduler tests."""

from datetime import datetime

import pytest

from src.config.settings import Settings
from src.nlp.classifier import EventClassifier
from src.nlp.schemas import ParsedEvent


@pytest.fixture
def test_settings() -> Settings:
    """Settings configured for testing."""
    return Settings(
        environment="development",
        log_level="DEBUG",
    )


@pytest.fixture
def fixed_now() -> datetime:
    """Tuesday 2026-03-10 09:00 local time, the reference instant for parses."""
    return datetime(2026, 3, 10, 9, 0)


@pytest.fixture
def classifier() -> EventClassifier:
    """Classifier with default config."""
    return EventClassifier()


@pytest.fixture
def timer_event() -> ParsedEvent:
    """A three-second timer."""
    return ParsedEvent(type="timer", label="Tea", language="en", duration=3)


@pytest.fixture
def alarm_event() -> ParsedEvent:
    """An alarm without a duration."""
    return ParsedEvent(
        type="alarm",
        label="New Event",
        language="en",
        time=datetime(2026, 3, 11, 7, 0),
        recurring=("Mon", "Tue", "Wed", "Thu", "Fri"),
    )
