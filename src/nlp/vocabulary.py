"""Per-language keyword tables for the utterance parser.

Every table is keyed by language code and built once at import time as a
read-only mapping, so extractors can share them across concurrent parses.
English entries are always overlaid by the ``merged_*`` helpers, which lets
an English unit or keyword parse inside an otherwise French sentence.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from types import MappingProxyType
from typing import TypeVar

V = TypeVar("V")

DEFAULT_LANGUAGE = "en"

# Detection priority for non-English languages; English is the fallback
DETECTION_ORDER: tuple[str, ...] = ("fr", "es", "de")

SUPPORTED_LANGUAGES: tuple[str, ...] = (DEFAULT_LANGUAGE, *DETECTION_ORDER)

WEEKDAYS: tuple[str, ...] = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")

RANGE_MARKER = "-"


def _freeze(tables: dict[str, dict[str, V]]) -> Mapping[str, Mapping[str, V]]:
    return MappingProxyType(
        {lang: MappingProxyType(dict(table)) for lang, table in tables.items()}
    )


def _freeze_words(tables: dict[str, tuple[str, ...]]) -> Mapping[str, tuple[str, ...]]:
    return MappingProxyType(dict(tables))


# Unit word → seconds multiplier
TIME_UNITS: Mapping[str, Mapping[str, int]] = _freeze({
    "en": {
        "second": 1, "seconds": 1, "sec": 1, "secs": 1, "s": 1,
        "minute": 60, "minutes": 60, "min": 60, "mins": 60, "m": 60,
        "hour": 3600, "hours": 3600, "hr": 3600, "hrs": 3600, "h": 3600,
    },
    "fr": {
        "seconde": 1, "secondes": 1, "sec": 1, "s": 1,
        "minute": 60, "minutes": 60, "min": 60, "m": 60,
        "heure": 3600, "heures": 3600, "h": 3600,
    },
    "es": {
        "segundo": 1, "segundos": 1, "seg": 1, "s": 1,
        "minuto": 60, "minutos": 60, "min": 60, "m": 60,
        "hora": 3600, "horas": 3600, "h": 3600,
    },
    "de": {
        "sekunde": 1, "sekunden": 1, "sek": 1, "s": 1,
        "minute": 60, "minuten": 60, "min": 60, "m": 60,
        "stunde": 3600, "stunden": 3600, "std": 3600, "h": 3600,
    },
})

# Words joining the hour and minute halves of "2 hours and 30 minutes"
CONJUNCTIONS: Mapping[str, tuple[str, ...]] = _freeze_words({
    "en": ("and",),
    "fr": ("et",),
    "es": ("y",),
    "de": ("und",),
})

# Day / weekday-class word → weekday code or range token
DAY_WORDS: Mapping[str, Mapping[str, str]] = _freeze({
    "en": {
        "monday": "Mon", "tuesday": "Tue", "wednesday": "Wed",
        "thursday": "Thu", "friday": "Fri", "saturday": "Sat",
        "sunday": "Sun",
        "weekday": "Mon-Fri", "weekdays": "Mon-Fri",
        "weekend": "Sat-Sun",
        "day": "Mon-Sun", "everyday": "Mon-Sun", "daily": "Mon-Sun",
    },
    "fr": {
        "lundi": "Mon", "mardi": "Tue", "mercredi": "Wed", "jeudi": "Thu",
        "vendredi": "Fri", "samedi": "Sat", "dimanche": "Sun",
        "semaine": "Mon-Fri", "jour": "Mon-Sun",
    },
    "es": {
        "lunes": "Mon", "martes": "Tue", "miércoles": "Wed", "jueves": "Thu",
        "viernes": "Fri", "sábado": "Sat", "domingo": "Sun",
        "día": "Mon-Sun",
    },
    "de": {
        "montag": "Mon", "dienstag": "Tue", "mittwoch": "Wed",
        "donnerstag": "Thu", "freitag": "Fri", "samstag": "Sat",
        "sonntag": "Sun",
        "werktags": "Mon-Fri", "tag": "Mon-Sun",
    },
})

# Quantifier introducing a recurrence ("every monday", "chaque lundi")
RECURRENCE_QUANTIFIERS: Mapping[str, tuple[str, ...]] = _freeze_words({
    "en": ("every",),
    "fr": ("chaque",),
    "es": ("cada",),
    "de": ("jeden",),
})

# Whole-word indicators used by language detection. None of these is a
# common English word.
DETECTION_KEYWORDS: Mapping[str, tuple[str, ...]] = _freeze_words({
    "fr": (
        "rappelle", "dans", "heure", "heures", "seconde", "secondes",
        "demain", "réunion", "réveil", "réveille", "chaque",
    ),
    "es": (
        "recuérdame", "hora", "horas", "minuto", "minutos", "segundo",
        "segundos", "mañana", "reunión", "despierta", "despiértame", "cada",
    ),
    "de": (
        "erinnere", "stunde", "stunden", "minuten", "sekunde", "sekunden",
        "morgen", "weck", "wecke", "wecker", "besprechung", "jeden",
    ),
})

TOMORROW_KEYWORDS: Mapping[str, tuple[str, ...]] = _freeze_words({
    "en": ("tomorrow",),
    "fr": ("demain",),
    "es": ("mañana",),
    "de": ("morgen",),
})

ALARM_KEYWORDS: Mapping[str, tuple[str, ...]] = _freeze_words({
    "en": ("wake", "alarm"),
    "fr": ("réveil", "réveille"),
    "es": ("despierta", "despiértame", "alarma"),
    "de": ("weck", "wecke", "wecker"),
})

POMODORO_KEYWORDS: Mapping[str, tuple[str, ...]] = _freeze_words({
    "en": ("pomodoro",),
    "fr": ("pomodoro",),
    "es": ("pomodoro",),
    "de": ("pomodoro",),
})

# Preposition that may precede a duration ("in 2 hours") or a clock time
DURATION_PREPOSITIONS: tuple[str, ...] = ("in", "dans", "en")
CLOCK_PREPOSITIONS: tuple[str, ...] = ("at", "à", "um", "a las", "a la")

# Word that may follow a clock reading ("um 6 Uhr")
CLOCK_SUFFIXES: tuple[str, ...] = ("uhr",)

# Ordered lead-in phrases; only the first one matching at the start is removed
LEAD_IN_PREFIXES: tuple[str, ...] = (
    r"remind\s+me(?:\s+to)?|rappelle[-\s]moi(?:\s+de)?|recuérdame(?:\s+que)?|erinnere\s+mich(?:\s+an)?",
    r"set\s+(?:an?\s+)?(?:timer|alarm)(?:\s+(?:for|to))?",
    r"wake\s+me(?:\s+up)?(?:\s+at)?|réveille[-\s]moi(?:\s+à)?|despiértame(?:\s+a\s+las?)?|wecke?\s+mich(?:\s+um)?",
    r"meeting|réunion|reunión|besprechung",
)

POMODORO_PREFIXES: tuple[str, ...] = (
    r"(?:start\s+(?:an?\s+)?)?pomodoro(?:\s+(?:for|pour|para|für))?",
)

# Leftover connector words removed from the front of a label
LABEL_CONNECTORS: tuple[str, ...] = ("to", "for", "de", "que", "an", "pour", "para", "für")


def _overlay(tables: Mapping[str, Mapping[str, V]], language: str) -> dict[str, V]:
    merged = dict(tables[DEFAULT_LANGUAGE])
    # Detected-language entries win on key collisions
    merged.update(tables.get(language, {}))
    return merged


def merged_units(language: str) -> dict[str, int]:
    """Unit table for ``language`` with English overlaid underneath."""
    return _overlay(TIME_UNITS, language)


def merged_day_words(language: str) -> dict[str, str]:
    """Day-word table for ``language`` with English overlaid underneath."""
    return _overlay(DAY_WORDS, language)


def merged_words(tables: Mapping[str, tuple[str, ...]], language: str) -> tuple[str, ...]:
    """English words followed by the detected language's words, de-duplicated."""
    words = list(tables.get(DEFAULT_LANGUAGE, ()))
    for word in tables.get(language, ()):
        if word not in words:
            words.append(word)
    return tuple(words)


def all_words(tables: Mapping[str, object]) -> tuple[str, ...]:
    """Every key or word across all languages, de-duplicated in table order."""
    words: list[str] = []
    for table in tables.values():
        for word in table:
            if word not in words:
                words.append(word)
    return tuple(words)


def alternation(words: tuple[str, ...] | list[str]) -> str:
    """Regex alternation of escaped words, longest first."""
    ordered = sorted(set(words), key=lambda w: (-len(w), w))
    return "|".join(re.escape(w) for w in ordered)
