"""
Natural-language parsing of scheduling utterances.

Turns short free-text requests ("Remind me to go shopping in 2 hours",
"Réunion demain à 14h") into timers, alarms, calendar events or pomodoro
sessions using keyword tables and ordered regex patterns in English,
French, Spanish and German.

Components:
- ParserConfig: Configuration for the parser
- ParsedEvent: Immutable parse result
- EventClassifier: Ordered rule set producing a ParsedEvent
- parse: Parse with the shared default classifier
- format_duration / format_time: Presentation helpers
"""

from src.nlp.classifier import EventClassifier, get_classifier, parse
from src.nlp.config import ParserConfig
from src.nlp.formatting import (
    format_countdown,
    format_duration,
    format_time,
    split_duration,
)
from src.nlp.language import detect_language
from src.nlp.schemas import EventType, ParsedEvent

__all__ = [
    "EventClassifier",
    "EventType",
    "ParsedEvent",
    "ParserConfig",
    "detect_language",
    "format_countdown",
    "format_duration",
    "format_time",
    "get_classifier",
    "parse",
    "split_duration",
]
