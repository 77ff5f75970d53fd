"""Tests for TimeOfDayExtractor."""

from datetime import datetime

import pytest

from src.nlp.time_of_day import TimeOfDayExtractor, to_24_hour


@pytest.fixture
def clock():
    return TimeOfDayExtractor()


class TestTwelveHourConversion:
    """Tests for to_24_hour."""

    def test_pm_adds_twelve(self):
        assert to_24_hour(2, "pm") == 14
        assert to_24_hour(11, "PM") == 23

    def test_noon_and_midnight(self):
        assert to_24_hour(12, "pm") == 12
        assert to_24_hour(12, "am") == 0

    def test_am_unchanged(self):
        assert to_24_hour(7, "am") == 7

    def test_no_period(self):
        assert to_24_hour(14, None) == 14

    def test_already_24_hour(self):
        assert to_24_hour(14, "pm") == 14


class TestPatterns:
    """Tests for the three clock formats."""

    def test_colon_with_period(self, clock, fixed_now):
        assert clock.extract("Meeting at 2:30 PM", fixed_now) == datetime(2026, 3, 10, 14, 30)

    def test_colon_24_hour(self, clock, fixed_now):
        assert clock.extract("Standup 10:15", fixed_now) == datetime(2026, 3, 10, 10, 15)

    def test_period_without_minutes(self, clock, fixed_now):
        assert clock.extract("Dentist 3pm", fixed_now) == datetime(2026, 3, 10, 15, 0)
        assert clock.extract("Dentist 3 pm", fixed_now) == datetime(2026, 3, 10, 15, 0)

    def test_h_separator(self, clock, fixed_now):
        assert clock.extract("Réunion à 14h30", fixed_now) == datetime(2026, 3, 10, 14, 30)
        assert clock.extract("Réunion à 14h", fixed_now) == datetime(2026, 3, 10, 14, 0)

    def test_noon(self, clock, fixed_now):
        assert clock.extract("Lunch 12pm", fixed_now) == datetime(2026, 3, 10, 12, 0)

    def test_colon_tried_first(self, clock, fixed_now):
        assert clock.extract("7pm or 19:45", fixed_now) == datetime(2026, 3, 10, 19, 45)


class TestRollover:
    """A time that is not after now moves to the next day."""

    def test_past_time_is_tomorrow(self, clock, fixed_now):
        assert clock.extract("Wake me at 7am", fixed_now) == datetime(2026, 3, 11, 7, 0)

    def test_equal_time_is_tomorrow(self, clock, fixed_now):
        assert clock.extract("at 9:00", fixed_now) == datetime(2026, 3, 11, 9, 0)

    def test_midnight_is_tomorrow(self, clock, fixed_now):
        assert clock.extract("at 12am", fixed_now) == datetime(2026, 3, 11, 0, 0)

    def test_never_in_past(self, clock, fixed_now):
        for hour in range(24):
            result = clock.extract(f"at {hour}:00", fixed_now)
            assert result > fixed_now

    def test_month_boundary(self, clock):
        now = datetime(2026, 3, 31, 23, 30)
        assert clock.extract("at 6am", now) == datetime(2026, 4, 1, 6, 0)

    def test_seconds_zeroed(self, clock):
        now = datetime(2026, 3, 10, 9, 0, 45, 123456)
        result = clock.extract("at 10:15", now)
        assert result.second == 0
        assert result.microsecond == 0


class TestNoMatch:
    """Tests for inputs without a valid clock time."""

    def test_no_time(self, clock, fixed_now):
        assert clock.extract("buy milk", fixed_now) is None

    def test_out_of_range(self, clock, fixed_now):
        assert clock.extract("at 25:00", fixed_now) is None
        assert clock.extract("at 12:60pm", fixed_now) is None

    def test_bare_number(self, clock, fixed_now):
        assert clock.extract("Meeting at 3", fixed_now) is None


class TestSpans:
    """Tests for label-stripping spans."""

    def test_span_includes_preposition(self, clock):
        text = "Call mom at 5pm"
        assert [text[s:e] for s, e in clock.spans(text)] == ["at 5pm"]

    def test_localized_preposition(self, clock):
        text = "Réunion à 14h30"
        assert "à 14h30" in [text[s:e] for s, e in clock.spans(text)]

    def test_suffix_included(self, clock):
        text = "Wecker um 6:30 Uhr"
        assert [text[s:e] for s, e in clock.spans(text)] == ["um 6:30 Uhr"]

    def test_bare_hour_after_preposition(self, clock):
        text = "Weck mich um 6 Uhr"
        assert [text[s:e] for s, e in clock.spans(text)] == ["um 6 Uhr"]
        text = "Dentist at 3"
        assert [text[s:e] for s, e in clock.spans(text)] == ["at 3"]

    def test_bare_hour_not_extracted(self, clock, fixed_now):
        assert clock.extract("Weck mich um 6 Uhr", fixed_now) is None
