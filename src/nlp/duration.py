"""Elapsed-time extraction ("2 hours", "1h30m", "90 secondes").

Patterns are tried most specific first and the first pattern that matches
decides the result, even when a later one would also match.
"""

from __future__ import annotations

import logging
import re
from functools import lru_cache

from src.nlp.vocabulary import (
    CONJUNCTIONS,
    DURATION_PREPOSITIONS,
    TIME_UNITS,
    all_words,
    alternation,
    merged_units,
    merged_words,
)

logger = logging.getLogger(__name__)

# Unit must not run into a following letter ("2 sets" is not "2 s"); digits
# may follow so that "1h30m" still splits into hours and minutes.
_UNIT_END = r"(?![^\W\d_])"

PATTERN_ORDER: tuple[str, ...] = ("hours_minutes", "minutes", "seconds", "hours")


def _units_with(units: dict[str, int], multiplier: int) -> list[str]:
    return [word for word, value in units.items() if value == multiplier]


@lru_cache(maxsize=None)
def _build_patterns(language: str) -> tuple[tuple[str, re.Pattern[str]], ...]:
    """
    Build and compile the ordered duration patterns for a language.

    Returns:
        Tuple of (name, compiled pattern) pairs in evaluation order.
    """
    units = merged_units(language)
    hours = alternation(_units_with(units, 3600))
    minutes = alternation(_units_with(units, 60))
    seconds = alternation(_units_with(units, 1))
    conj = alternation(merged_words(CONJUNCTIONS, language))

    patterns = {
        # "2 hours and 30 minutes", "1h30m", "2 heures 15"
        "hours_minutes": (
            rf"(?P<value>\d+)\s*(?P<unit>{hours}){_UNIT_END}\s*(?:(?:{conj})\s*)?"
            rf"(?:(?P<value2>\d+)\s*(?:(?P<unit2>{minutes}){_UNIT_END})?)?"
        ),
        "minutes": rf"(?P<value>\d+)\s*(?P<unit>{minutes}){_UNIT_END}",
        "seconds": rf"(?P<value>\d+)\s*(?P<unit>{seconds}){_UNIT_END}",
        "hours": rf"(?P<value>\d+)\s*(?P<unit>{hours}){_UNIT_END}",
    }
    return tuple(
        (name, re.compile(patterns[name], re.IGNORECASE)) for name in PATTERN_ORDER
    )


def _all_units_with(multiplier: int) -> list[str]:
    return [
        word
        for table in TIME_UNITS.values()
        for word, value in table.items()
        if value == multiplier
    ]


@lru_cache(maxsize=1)
def _phrase_pattern() -> re.Pattern[str]:
    """
    Any-language duration phrase, used to strip durations from labels.

    An hour phrase extends over its conjunction and minute part
    ("2 hours and 30 minutes", "2 heures 15"), matching what the
    extractor reads as one duration. A trailing number followed by some
    other unit ("1 hour 30 seconds") is left for its own match.
    """
    units = alternation(all_words(TIME_UNITS))
    hours = alternation(_all_units_with(3600))
    minutes = alternation(_all_units_with(60))
    conj = alternation(all_words(CONJUNCTIONS))
    preps = alternation(DURATION_PREPOSITIONS)
    minute_part = (
        rf"\s*(?:(?:{conj})\s+)?\d+(?!\d)"
        rf"(?:\s*(?:{minutes}){_UNIT_END}|(?!\s*(?:{units}){_UNIT_END}))"
    )
    return re.compile(
        rf"(?:\b(?:{preps})\s+)?(?<!\d)\d+\s*"
        rf"(?:(?:{hours}){_UNIT_END}(?:{minute_part})?|(?:{units}){_UNIT_END})",
        re.IGNORECASE,
    )


class DurationExtractor:
    """
    Extracts an explicit elapsed-time quantity in seconds.

    The unit table for the detected language is merged over the English
    table, so "2 hours" parses inside a German sentence too.

    Usage:
        extractor = DurationExtractor()
        extractor.extract("Remind me in 1h30m", "en")  # 5400
    """

    def extract(self, text: str, language: str) -> int | None:
        """
        Find the first duration phrase in ``text``.

        Args:
            text: Raw utterance.
            language: Detected language code.

        Returns:
            Positive number of seconds, or None when no pattern matches
            or the matched total is zero.
        """
        units = merged_units(language)
        for name, pattern in _build_patterns(language):
            match = pattern.search(text)
            if not match:
                continue

            try:
                total = int(match.group("value")) * units[match.group("unit").lower()]
                if name == "hours_minutes":
                    value2 = match.group("value2")
                    unit2 = match.group("unit2")
                    if value2 and unit2:
                        total += int(value2) * units.get(unit2.lower(), 0)
            except (KeyError, ValueError) as e:
                logger.debug("Unconvertible duration %r: %s", match.group(0), e)
                return None

            logger.debug("Duration pattern %s matched %r", name, match.group(0))
            return total if total > 0 else None

        return None

    def spans(self, text: str) -> list[tuple[int, int]]:
        """Character spans of every duration phrase in any supported language."""
        return [m.span() for m in _phrase_pattern().finditer(text)]
