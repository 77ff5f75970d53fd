"""Rule-based classification of utterances into schedulable events.

The classifier detects the language, then walks a fixed, ordered list of
rules. Each rule either returns a ParsedEvent or None; the first event wins
and later rules are never consulted. The order is part of the contract:

    1. pomodoro  - "pomodoro" keyword, fixed session length
    2. alarm     - wake/alarm keyword, optional clock time and recurrence
    3. timer     - explicit duration
    4. event     - clock time and/or relative date
    5. fallback  - quick timer labelled with the raw input

An alarm keyword therefore beats a duration ("wake me in 2 hours" is an
alarm, and the duration is not surfaced).
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime
from functools import lru_cache

from src.nlp.config import ParserConfig
from src.nlp.duration import DurationExtractor
from src.nlp.label import LabelExtractor
from src.nlp.language import detect_language
from src.nlp.recurrence import RecurrenceExtractor
from src.nlp.relative_date import RelativeDateResolver
from src.nlp.schemas import DEFAULT_LABELS, ParsedEvent
from src.nlp.time_of_day import TimeOfDayExtractor
from src.nlp.vocabulary import (
    ALARM_KEYWORDS,
    LEAD_IN_PREFIXES,
    POMODORO_KEYWORDS,
    POMODORO_PREFIXES,
    all_words,
    alternation,
    merged_words,
)

logger = logging.getLogger(__name__)

_POMODORO = re.compile(rf"\b(?:{alternation(all_words(POMODORO_KEYWORDS))})\b", re.IGNORECASE)


@lru_cache(maxsize=None)
def _alarm_pattern(language: str) -> re.Pattern[str]:
    words = merged_words(ALARM_KEYWORDS, language)
    return re.compile(rf"\b(?:{alternation(words)})\b", re.IGNORECASE)


@dataclass(frozen=True)
class ParseContext:
    """Everything a rule needs about the utterance being parsed."""

    text: str
    language: str
    now: datetime


Rule = Callable[[ParseContext], "ParsedEvent | None"]


class EventClassifier:
    """
    Turns an utterance into a ParsedEvent.

    Stateless between calls: the extractors and vocabulary tables are
    read-only, and the wall clock is read once per parse.

    Usage:
        classifier = EventClassifier()
        event = classifier.parse("Wake me up at 7am every weekday")
        event.type       # "alarm"
        event.recurring  # ("Mon", "Tue", "Wed", "Thu", "Fri")
    """

    def __init__(self, config: ParserConfig | None = None):
        self._config = config or ParserConfig()
        self._durations = DurationExtractor()
        self._clock = TimeOfDayExtractor()
        self._dates = RelativeDateResolver()
        self._recurrence = RecurrenceExtractor()
        self._labels = LabelExtractor([
            self._durations.spans,
            self._clock.spans,
            self._dates.spans,
            self._recurrence.spans,
        ])
        self._rules: tuple[tuple[str, Rule], ...] = (
            ("pomodoro", self._pomodoro),
            ("alarm", self._alarm),
            ("timer", self._timer),
            ("event", self._event),
            ("fallback", self._fallback),
        )

    @property
    def rule_names(self) -> tuple[str, ...]:
        """Rule names in evaluation order."""
        return tuple(name for name, _ in self._rules)

    def parse(self, text: str, now: datetime | None = None) -> ParsedEvent | None:
        """
        Parse an utterance.

        Args:
            text: Raw utterance.
            now: Reference instant. Defaults to the local wall clock, read
                once so the whole parse sees the same time.

        Returns:
            ParsedEvent, or None when the input is empty or whitespace.

        Raises:
            TypeError: If ``text`` is not a string.
        """
        if not isinstance(text, str):
            raise TypeError(f"text must be str, not {type(text).__name__}")
        if not text.strip():
            return None

        context = ParseContext(
            text=text,
            language=detect_language(text),
            now=now or datetime.now(),
        )

        for name, rule in self._rules:
            event = rule(context)
            if event is not None:
                logger.debug(
                    "Classified %r as %s via rule %s (language=%s)",
                    text, event.type, name, context.language,
                )
                return event

        # The fallback rule always produces an event
        raise RuntimeError("No classification rule produced an event")

    def _label(self, text: str, event_type: str, **kwargs) -> str:
        return self._labels.extract(text, **kwargs) or DEFAULT_LABELS[event_type]

    def _pomodoro(self, ctx: ParseContext) -> ParsedEvent | None:
        if not _POMODORO.search(ctx.text):
            return None
        return ParsedEvent(
            type="pomodoro",
            label=self._label(
                ctx.text, "pomodoro", prefixes=POMODORO_PREFIXES + LEAD_IN_PREFIXES
            ),
            language=ctx.language,
            duration=self._config.pomodoro_seconds,
        )

    def _alarm(self, ctx: ParseContext) -> ParsedEvent | None:
        if not _alarm_pattern(ctx.language).search(ctx.text):
            return None
        # Neither a time nor a recurrence is required
        return ParsedEvent(
            type="alarm",
            label=self._label(ctx.text, "alarm"),
            language=ctx.language,
            time=self._clock.extract(ctx.text, ctx.now),
            recurring=self._recurrence.extract(ctx.text, ctx.language),
        )

    def _timer(self, ctx: ParseContext) -> ParsedEvent | None:
        duration = self._durations.extract(ctx.text, ctx.language)
        if not duration:
            return None
        return ParsedEvent(
            type="timer",
            label=self._label(ctx.text, "timer"),
            language=ctx.language,
            duration=duration,
        )

    def _event(self, ctx: ParseContext) -> ParsedEvent | None:
        clock = self._clock.extract(ctx.text, ctx.now)
        day = self._dates.resolve(ctx.text, ctx.language, ctx.now)
        if clock is None and day is None:
            return None

        if clock is None:
            when = ctx.now.replace(second=0, microsecond=0)
        else:
            when = clock
        if day is not None:
            when = when.replace(year=day.year, month=day.month, day=day.day)

        return ParsedEvent(
            type="event",
            label=self._label(ctx.text, "event"),
            language=ctx.language,
            time=when,
        )

    def _fallback(self, ctx: ParseContext) -> ParsedEvent:
        return ParsedEvent(
            type="timer",
            label=ctx.text.strip() or DEFAULT_LABELS["timer"],
            language=ctx.language,
            duration=self._config.fallback_timer_seconds,
        )


_default_classifier: EventClassifier | None = None


def get_classifier() -> EventClassifier:
    """Get the shared default classifier, creating it on first use."""
    global _default_classifier
    if _default_classifier is None:
        _default_classifier = EventClassifier()
    return _default_classifier


def parse(text: str, now: datetime | None = None) -> ParsedEvent | None:
    """Parse an utterance with the default classifier."""
    return get_classifier().parse(text, now=now)
