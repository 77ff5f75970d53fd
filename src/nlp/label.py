"""Display-label cleanup.

The label is what is left of the utterance once the lead-in phrase and every
recognized time, date and recurrence phrase are removed. Spans are matched
independently against the original text and deleted in a single pass, so
the order in which extractors report them does not matter.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable
from functools import lru_cache

from src.nlp.vocabulary import LABEL_CONNECTORS, LEAD_IN_PREFIXES, alternation

Span = tuple[int, int]
SpanSource = Callable[[str], list[Span]]

_WHITESPACE = re.compile(r"\s+")
_CONNECTOR = re.compile(
    rf"^(?:{alternation(LABEL_CONNECTORS)})(?:\s+|$)", re.IGNORECASE
)


@lru_cache(maxsize=None)
def _prefix_patterns(prefixes: tuple[str, ...]) -> tuple[re.Pattern[str], ...]:
    return tuple(re.compile(rf"^\s*(?:{p})\b\s*", re.IGNORECASE) for p in prefixes)


def merge_spans(spans: Iterable[Span]) -> list[Span]:
    """Union of possibly overlapping spans, sorted by start."""
    merged: list[Span] = []
    for start, end in sorted(spans):
        if merged and start <= merged[-1][1]:
            merged[-1] = (merged[-1][0], max(merged[-1][1], end))
        else:
            merged.append((start, end))
    return merged


def remove_spans(text: str, spans: Iterable[Span]) -> str:
    """Delete every span from ``text``, leaving a space at each cut."""
    parts: list[str] = []
    cursor = 0
    for start, end in merge_spans(spans):
        parts.append(text[cursor:start])
        cursor = end
    parts.append(text[cursor:])
    return " ".join(parts)


class LabelExtractor:
    """
    Derives a human label from an utterance.

    Args:
        span_sources: Callables returning the spans of phrases to strip
            (durations, clock times, relative dates, recurrences).

    Usage:
        labels = LabelExtractor([durations.spans, clocks.spans])
        labels.extract("Remind me to go shopping in 2 hours")  # "go shopping"
    """

    def __init__(self, span_sources: Iterable[SpanSource]):
        self._sources = tuple(span_sources)

    def extract(self, text: str, prefixes: tuple[str, ...] = LEAD_IN_PREFIXES) -> str:
        """
        Strip lead-in and scheduling phrases from ``text``.

        Args:
            text: Raw utterance.
            prefixes: Ordered lead-in patterns; only the first one matching
                at the start of the text is removed.

        Returns:
            Cleaned label, possibly empty. Callers supply their own default.
        """
        spans: list[Span] = []
        for pattern in _prefix_patterns(prefixes):
            match = pattern.match(text)
            if match:
                spans.append(match.span())
                break

        for source in self._sources:
            spans.extend(source(text))

        label = _WHITESPACE.sub(" ", remove_spans(text, spans)).strip()
        return _CONNECTOR.sub("", label, count=1)
