"""Relative day resolution.

Only "tomorrow" and its translations are understood. Expressions such as
"in 3 days" or "next Friday" resolve to nothing.
"""

from __future__ import annotations

import re
from datetime import date, datetime, timedelta
from functools import lru_cache

from src.nlp.vocabulary import TOMORROW_KEYWORDS, all_words, alternation, merged_words


@lru_cache(maxsize=None)
def _tomorrow_pattern(language: str) -> re.Pattern[str]:
    words = merged_words(TOMORROW_KEYWORDS, language)
    return re.compile(rf"\b(?:{alternation(words)})\b", re.IGNORECASE)


_ANY_TOMORROW = re.compile(
    rf"\b(?:{alternation(all_words(TOMORROW_KEYWORDS))})\b",
    re.IGNORECASE,
)


class RelativeDateResolver:
    """Resolves "tomorrow" (in the detected language or English) to a date."""

    def resolve(self, text: str, language: str, now: datetime) -> date | None:
        """
        Args:
            text: Raw utterance.
            language: Detected language code.
            now: Reference instant for this parse.

        Returns:
            The day after ``now``, or None when no keyword is present.
        """
        if _tomorrow_pattern(language).search(text):
            return now.date() + timedelta(days=1)
        return None

    def spans(self, text: str) -> list[tuple[int, int]]:
        """Character spans of every relative-date keyword in any language."""
        return [m.span() for m in _ANY_TOMORROW.finditer(text)]
