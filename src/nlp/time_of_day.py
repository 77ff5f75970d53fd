"""Clock-time extraction ("7am", "2:30 PM", "14h30")."""

from __future__ import annotations

import logging
import re
from datetime import datetime, timedelta

from src.nlp.vocabulary import CLOCK_PREPOSITIONS, CLOCK_SUFFIXES, alternation

logger = logging.getLogger(__name__)

# Evaluated in order, first match wins
_CLOCK_PATTERNS: tuple[tuple[str, re.Pattern[str]], ...] = (
    (
        "colon",
        re.compile(
            r"(?<!\d)(?P<hour>\d{1,2}):(?P<minute>\d{2})(?:\s*(?P<period>am|pm)\b)?",
            re.IGNORECASE,
        ),
    ),
    (
        "period",
        re.compile(r"(?<!\d)(?P<hour>\d{1,2})\s*(?P<period>am|pm)\b", re.IGNORECASE),
    ),
    (
        "h_separator",
        re.compile(
            r"(?<!\d)(?P<hour>\d{1,2})h(?P<minute>\d{2})?(?![^\W\d_])",
            re.IGNORECASE,
        ),
    ),
)

_PREPOSITION = rf"\b(?:{alternation(CLOCK_PREPOSITIONS)})\s+"
_SUFFIX = rf"(?:\s*(?:{alternation(CLOCK_SUFFIXES)})\b)?"

# Label stripping also removes a bare hour after a clock preposition
# ("um 6 Uhr", "at 3"), which no extraction pattern accepts.
_LABEL_PATTERNS: tuple[re.Pattern[str], ...] = tuple(
    re.compile(f"(?:{_PREPOSITION})?" + pattern.pattern + _SUFFIX, re.IGNORECASE)
    for _, pattern in _CLOCK_PATTERNS
) + (
    re.compile(
        _PREPOSITION + r"\d{1,2}(?![\d:h]|\s*[ap]m\b)" + _SUFFIX, re.IGNORECASE
    ),
)


def to_24_hour(hour: int, period: str | None) -> int:
    """
    Convert a 12-hour clock reading to 24-hour.

    "pm" adds 12 unless the hour is already 12, "am" turns 12 into 0.
    Hours above 12 are taken as already 24-hour.
    """
    if period is None or hour > 12:
        return hour
    period = period.lower()
    if period == "pm" and hour != 12:
        return hour + 12
    if period == "am" and hour == 12:
        return 0
    return hour


class TimeOfDayExtractor:
    """
    Extracts a clock time and anchors it to the reference day.

    A time that is not strictly after ``now`` rolls over to the next day,
    so "wake me at 7am" said at 8am means tomorrow at 7am.
    """

    def extract(self, text: str, now: datetime) -> datetime | None:
        """
        Find the first clock time in ``text``.

        Args:
            text: Raw utterance.
            now: Reference instant for this parse.

        Returns:
            Datetime with seconds zeroed, or None when nothing valid matches.
        """
        for name, pattern in _CLOCK_PATTERNS:
            match = pattern.search(text)
            if not match:
                continue

            groups = match.groupdict()
            try:
                hour = to_24_hour(int(groups["hour"]), groups.get("period"))
                minute = int(groups["minute"]) if groups.get("minute") else 0
                result = now.replace(hour=hour, minute=minute, second=0, microsecond=0)
            except ValueError:
                logger.debug("Out-of-range clock time %r", match.group(0))
                continue

            if result <= now:
                result += timedelta(days=1)

            logger.debug("Clock pattern %s matched %r", name, match.group(0))
            return result

        return None

    def spans(self, text: str) -> list[tuple[int, int]]:
        """Character spans of every clock-time phrase, with its preposition."""
        return [m.span() for pattern in _LABEL_PATTERNS for m in pattern.finditer(text)]
