"""Tests for label cleanup."""

import pytest

from src.nlp.duration import DurationExtractor
from src.nlp.label import LabelExtractor, merge_spans, remove_spans
from src.nlp.recurrence import RecurrenceExtractor
from src.nlp.relative_date import RelativeDateResolver
from src.nlp.time_of_day import TimeOfDayExtractor
from src.nlp.vocabulary import POMODORO_PREFIXES


@pytest.fixture
def labels():
    return LabelExtractor([
        DurationExtractor().spans,
        TimeOfDayExtractor().spans,
        RelativeDateResolver().spans,
        RecurrenceExtractor().spans,
    ])


class TestSpanHelpers:
    """Tests for merge_spans and remove_spans."""

    def test_merge_overlapping(self):
        assert merge_spans([(5, 8), (0, 3), (2, 4)]) == [(0, 4), (5, 8)]

    def test_merge_touching(self):
        assert merge_spans([(0, 3), (3, 6)]) == [(0, 6)]

    def test_merge_empty(self):
        assert merge_spans([]) == []

    def test_remove_leaves_gap(self):
        assert remove_spans("abc def ghi", [(4, 7)]) == "abc   ghi"

    def test_remove_nothing(self):
        assert remove_spans("abc", []) == "abc"


class TestLeadIn:
    """Tests for lead-in prefix stripping."""

    def test_remind_me_to(self, labels):
        assert labels.extract("Remind me to go shopping in 2 hours") == "go shopping"

    def test_connector_after_removed_phrase(self, labels):
        assert labels.extract("Remind me in 10 minutes to stretch") == "stretch"

    def test_only_first_prefix(self, labels):
        assert labels.extract("Remind me to meeting prep") == "meeting prep"

    def test_prefix_only_at_start(self, labels):
        assert labels.extract("Call and remind me to eat") == "Call and remind me to eat"

    def test_localized_prefixes(self, labels):
        assert labels.extract("Rappelle-moi de sortir le chien") == "sortir le chien"
        assert labels.extract("Erinnere mich in 30 Minuten an den Termin") == "den Termin"

    def test_custom_prefixes(self, labels):
        assert labels.extract("Pomodoro for project X", prefixes=POMODORO_PREFIXES) == "project X"
        assert labels.extract("Start a pomodoro", prefixes=POMODORO_PREFIXES) == ""


class TestScheduleStripping:
    """Tests for removal of time, date and recurrence phrases."""

    def test_event_phrases(self, labels):
        assert labels.extract("Meeting tomorrow at 2:30 PM") == ""

    def test_french_event(self, labels):
        assert labels.extract("Réunion demain à 14h avec Paul") == "avec Paul"

    def test_every_occurrence_removed(self, labels):
        assert labels.extract("water plants every monday and every friday") == "water plants and"

    def test_combined_duration_removed_whole(self, labels):
        assert labels.extract("Tea in 2 hours and 30 minutes") == "Tea"
        assert labels.extract("Tea in 2 heures et 15 minutes") == "Tea"
        assert labels.extract("Remind me in 2 hours 15") == ""

    def test_whitespace_collapsed(self, labels):
        assert labels.extract("  call   mom   at 5pm  ") == "call mom"

    def test_unrecognized_text_kept(self, labels):
        assert labels.extract("asdkjh") == "asdkjh"

    def test_never_invents_default(self, labels):
        assert labels.extract("in 5 minutes") == ""
