"""Recurrence extraction ("every weekday", "chaque lundi", "jeden Tag")."""

from __future__ import annotations

import re
from functools import lru_cache

from src.nlp.vocabulary import (
    DAY_WORDS,
    RANGE_MARKER,
    RECURRENCE_QUANTIFIERS,
    WEEKDAYS,
    all_words,
    alternation,
    merged_day_words,
    merged_words,
)


def expand_days(value: str) -> tuple[str, ...]:
    """
    Expand a weekday code or range token into weekday codes.

    Ranges are inclusive and follow the canonical Mon..Sun order; they never
    wrap from Sun back to Mon.

    Args:
        value: A weekday code ("Tue") or a range token ("Mon-Fri").

    Returns:
        Ordered tuple of weekday codes.

    Raises:
        ValueError: If a code is unknown or the range runs backwards.
    """
    if RANGE_MARKER not in value:
        if value not in WEEKDAYS:
            raise ValueError(f"Unknown weekday code: {value!r}")
        return (value,)

    start, end = value.split(RANGE_MARKER, 1)
    try:
        start_idx = WEEKDAYS.index(start)
        end_idx = WEEKDAYS.index(end)
    except ValueError as e:
        raise ValueError(f"Unknown weekday range: {value!r}") from e

    if end_idx < start_idx:
        raise ValueError(f"Weekday range must not wrap: {value!r}")
    return WEEKDAYS[start_idx : end_idx + 1]


@lru_cache(maxsize=None)
def _quantifier_pattern(language: str) -> re.Pattern[str]:
    quantifiers = alternation(merged_words(RECURRENCE_QUANTIFIERS, language))
    return re.compile(rf"\b(?:{quantifiers})\s+(?P<word>\w+)", re.IGNORECASE)


_LABEL_PATTERN = re.compile(
    rf"\b(?:{alternation(all_words(RECURRENCE_QUANTIFIERS))})\s+"
    rf"(?:{alternation(all_words(DAY_WORDS))})\b",
    re.IGNORECASE,
)


class RecurrenceExtractor:
    """
    Extracts a simple weekly repeat pattern.

    Only the first "every <word>" phrase is considered; an unknown word
    means no recurrence rather than an error.
    """

    def extract(self, text: str, language: str) -> tuple[str, ...] | None:
        """
        Args:
            text: Raw utterance.
            language: Detected language code.

        Returns:
            Ordered weekday codes, or None when no recurrence is found.
        """
        match = _quantifier_pattern(language).search(text)
        if not match:
            return None

        value = merged_day_words(language).get(match.group("word").lower())
        if value is None:
            return None
        return expand_days(value)

    def spans(self, text: str) -> list[tuple[int, int]]:
        """Character spans of every "every <day word>" phrase in any language."""
        return [m.span() for m in _LABEL_PATTERN.finditer(text)]
