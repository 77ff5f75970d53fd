"""Keyword-based language detection for short utterances."""

from __future__ import annotations

import re
from functools import lru_cache

from src.nlp.vocabulary import (
    DEFAULT_LANGUAGE,
    DETECTION_KEYWORDS,
    DETECTION_ORDER,
    alternation,
)


@lru_cache(maxsize=None)
def _keyword_pattern(language: str) -> re.Pattern[str]:
    return re.compile(rf"\b(?:{alternation(DETECTION_KEYWORDS[language])})\b")


def detect_language(text: str) -> str:
    """
    Guess the language of an utterance.

    Languages are tested in a fixed priority order and the first one with a
    whole-word keyword hit wins, so a single loan word decides the result.
    Callers should treat the answer as a hint: every extractor also accepts
    English vocabulary.

    Args:
        text: Raw utterance.

    Returns:
        A supported language code, ``"en"`` when nothing matches.
    """
    lower = text.lower()
    for language in DETECTION_ORDER:
        if _keyword_pattern(language).search(lower):
            return language
    return DEFAULT_LANGUAGE
