"""Tests for TimerBoard and ActiveEvent."""

from datetime import datetime, timezone

import pytest

from src.nlp.schemas import ParsedEvent
from src.timers.board import EventNotFoundError, TimerBoard
from src.timers.schemas import ActiveEvent


@pytest.fixture
def board():
    return TimerBoard()


class TestActiveEvent:
    """Tests for the countdown record."""

    def test_remaining_starts_at_duration(self, timer_event):
        active = ActiveEvent(parsed=timer_event)
        assert active.remaining_seconds == 3
        assert active.counts_down
        assert active.progress == 0.0

    def test_no_duration(self, alarm_event):
        active = ActiveEvent(parsed=alarm_event)
        assert active.remaining_seconds == 0
        assert not active.counts_down
        assert active.progress == 0.0

    def test_unique_ids(self, timer_event):
        assert ActiveEvent(parsed=timer_event).event_id != ActiveEvent(parsed=timer_event).event_id

    def test_start_time_is_utc(self, timer_event):
        assert ActiveEvent(parsed=timer_event).start_time.tzinfo == timezone.utc

    def test_to_dict(self, timer_event):
        active = ActiveEvent(
            parsed=timer_event,
            event_id="evt-1",
            start_time=datetime(2026, 3, 10, 9, 0, tzinfo=timezone.utc),
        )
        data = active.to_dict()
        assert data["event_id"] == "evt-1"
        assert data["label"] == "Tea"
        assert data["duration"] == 3
        assert data["remaining_seconds"] == 3
        assert data["start_time"] == "2026-03-10T09:00:00+00:00"
        assert data["is_paused"] is False
        assert data["is_complete"] is False


class TestBoardCollection:
    """Tests for add/get/list/delete."""

    def test_newest_first(self, board, timer_event, alarm_event):
        first = board.add(timer_event)
        second = board.add(alarm_event)
        assert board.list_events() == [second, first]
        assert len(board) == 2

    def test_add_does_not_mutate_parsed(self, board, timer_event):
        active = board.add(timer_event)
        board.tick(2)
        assert active.parsed is timer_event
        assert timer_event.duration == 3

    def test_get_unknown(self, board):
        with pytest.raises(EventNotFoundError):
            board.get("missing")

    def test_delete(self, board, timer_event):
        active = board.add(timer_event)
        board.delete(active.event_id)
        assert len(board) == 0
        with pytest.raises(KeyError):
            board.delete(active.event_id)

    def test_list_is_snapshot(self, board, timer_event):
        board.add(timer_event)
        board.list_events().clear()
        assert len(board) == 1


class TestTick:
    """Tests for countdown ticking."""

    def test_decrements(self, board, timer_event):
        active = board.add(timer_event)
        assert board.tick() == []
        assert active.remaining_seconds == 2
        assert active.progress == pytest.approx(100 / 3)

    def test_completes_and_clamps(self, board, timer_event):
        active = board.add(timer_event)
        completed = board.tick(10)
        assert completed == [active]
        assert active.remaining_seconds == 0
        assert active.is_complete
        assert active.progress == 100.0

    def test_completion_reported_once(self, board, timer_event):
        board.add(timer_event)
        assert len(board.tick(3)) == 1
        assert board.tick(3) == []

    def test_paused_is_skipped(self, board, timer_event):
        active = board.add(timer_event)
        board.pause(active.event_id)
        board.tick()
        assert active.remaining_seconds == 3
        board.resume(active.event_id)
        board.tick()
        assert active.remaining_seconds == 2

    def test_non_countdown_untouched(self, board, alarm_event):
        active = board.add(alarm_event)
        assert board.tick(5) == []
        assert not active.is_complete

    def test_pomodoro_counts_down(self, board):
        active = board.add(
            ParsedEvent(type="pomodoro", label="Focus Session", language="en", duration=1500)
        )
        board.tick(60)
        assert active.remaining_seconds == 1440

    def test_negative_rejected(self, board):
        with pytest.raises(ValueError):
            board.tick(-1)


class TestReset:
    """Tests for reset."""

    def test_restores_duration(self, board, timer_event):
        active = board.add(timer_event)
        original_start = active.start_time
        board.pause(active.event_id)
        board.resume(active.event_id)
        board.tick(3)

        board.reset(active.event_id)
        assert active.remaining_seconds == 3
        assert not active.is_complete
        assert not active.is_paused
        assert active.start_time >= original_start
