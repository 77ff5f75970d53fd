"""Tests for presentation helpers."""

from datetime import datetime, time

import pytest

from src.nlp.formatting import format_countdown, format_duration, format_time, split_duration


class TestFormatDuration:
    """Tests for format_duration."""

    def test_hours(self):
        assert format_duration(7200) == "2h 00m"
        assert format_duration(5400) == "1h 30m"
        assert format_duration(3605) == "1h 00m"

    def test_minutes(self):
        assert format_duration(90) == "1:30"
        assert format_duration(600) == "10:00"
        assert format_duration(61) == "1:01"

    def test_seconds(self):
        assert format_duration(45) == "45s"
        assert format_duration(0) == "0s"

    def test_negative_rejected(self):
        with pytest.raises(ValueError):
            format_duration(-1)


class TestSplitDuration:
    """The displayed components always add back up."""

    def test_components(self):
        assert split_duration(3725) == (1, 2, 5)

    def test_reconstructs_input(self):
        for seconds in range(0, 360000, 97):
            hours, minutes, secs = split_duration(seconds)
            assert 0 <= minutes < 60
            assert 0 <= secs < 60
            assert hours * 3600 + minutes * 60 + secs == seconds


class TestFormatCountdown:
    """Tests for format_countdown."""

    def test_under_an_hour(self):
        assert format_countdown(0) == "0:00"
        assert format_countdown(65) == "1:05"

    def test_over_an_hour(self):
        assert format_countdown(3661) == "1:01:01"


class TestFormatTime:
    """Tests for format_time."""

    def test_afternoon(self):
        assert format_time(datetime(2026, 3, 11, 14, 30)) == "2:30 PM"

    def test_morning(self):
        assert format_time(datetime(2026, 3, 11, 7, 5)) == "7:05 AM"

    def test_noon_and_midnight(self):
        assert format_time(time(12, 0)) == "12:00 PM"
        assert format_time(time(0, 15)) == "12:15 AM"
