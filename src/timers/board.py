"""In-memory board of active timers, alarms, events and pomodoros.

The board owns every mutation after parsing: pausing, resuming, resetting,
deleting, and the once-per-unit-time tick that drives countdowns.
"""

import logging
from datetime import datetime, timezone

from src.nlp.schemas import ParsedEvent
from src.timers.schemas import ActiveEvent

logger = logging.getLogger(__name__)


class EventNotFoundError(KeyError):
    """Raised when an operation names an event id the board does not hold."""


class TimerBoard:
    """Ordered collection of active events, newest first.

    Usage:
        board = TimerBoard()
        active = board.add(parse("Tea in 3 minutes"))
        finished = board.tick()        # decrements running countdowns
        board.pause(active.event_id)
    """

    def __init__(self) -> None:
        self._events: list[ActiveEvent] = []

    def __len__(self) -> int:
        return len(self._events)

    def add(self, parsed: ParsedEvent) -> ActiveEvent:
        """Start tracking a parsed event."""
        event = ActiveEvent(parsed=parsed)
        self._events.insert(0, event)
        logger.info(
            "Added %s %s (%r, %ss)",
            event.type, event.event_id, event.label, event.remaining_seconds,
        )
        return event

    def get(self, event_id: str) -> ActiveEvent:
        for event in self._events:
            if event.event_id == event_id:
                return event
        raise EventNotFoundError(event_id)

    def list_events(self) -> list[ActiveEvent]:
        """Snapshot of tracked events, newest first."""
        return list(self._events)

    def pause(self, event_id: str) -> ActiveEvent:
        event = self.get(event_id)
        event.is_paused = True
        return event

    def resume(self, event_id: str) -> ActiveEvent:
        event = self.get(event_id)
        event.is_paused = False
        return event

    def delete(self, event_id: str) -> None:
        self._events.remove(self.get(event_id))
        logger.info("Deleted %s", event_id)

    def reset(self, event_id: str) -> ActiveEvent:
        """Restore the full duration, clear pause/complete flags and restart."""
        event = self.get(event_id)
        event.remaining_seconds = event.parsed.duration or 0
        event.is_paused = False
        event.is_complete = False
        event.start_time = datetime.now(timezone.utc)
        return event

    def tick(self, seconds: int = 1) -> list[ActiveEvent]:
        """
        Advance every running countdown.

        Paused, completed, and non-countdown events (alarms, calendar
        events) are left untouched. Remaining time never drops below zero.

        Args:
            seconds: Elapsed time to subtract.

        Returns:
            Events that completed on this tick.
        """
        if seconds < 0:
            raise ValueError(f"seconds must be non-negative, got {seconds}")

        completed: list[ActiveEvent] = []
        for event in self._events:
            if event.is_paused or event.is_complete or not event.counts_down:
                continue

            event.remaining_seconds = max(0, event.remaining_seconds - seconds)
            if event.remaining_seconds == 0:
                event.is_complete = True
                completed.append(event)
                logger.info("Completed %s %s (%r)", event.type, event.event_id, event.label)

        return completed
