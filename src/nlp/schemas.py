"""Schema definitions for parsed events.

Provides the EventType literal and the immutable ParsedEvent record that
the classifier returns for every non-empty utterance.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Literal

EventType = Literal["timer", "alarm", "event", "pomodoro"]

VALID_EVENT_TYPES: frozenset[str] = frozenset({
    "timer",
    "alarm",
    "event",
    "pomodoro",
})

# Substituted when label extraction leaves nothing behind
DEFAULT_LABELS: dict[str, str] = {
    "timer": "Quick Timer",
    "alarm": "New Event",
    "event": "New Event",
    "pomodoro": "Focus Session",
}


@dataclass(frozen=True)
class ParsedEvent:
    """
    A schedulable event parsed from a free-text utterance.

    Instances are immutable. Consumers that need to track progress (the
    timer board) copy the fields into their own record.

    Attributes:
        type: Event category (timer, alarm, event, pomodoro).
        label: Non-empty display label.
        language: Detected language code of the utterance.
        duration: Positive length in seconds, set for timers and pomodoros.
        time: Absolute local point in time, set for alarms and events.
        recurring: Ordered weekday codes the event repeats on.

    Example:
        >>> event = ParsedEvent(type="timer", label="go shopping",
        ...                     language="en", duration=7200)
        >>> event.to_dict()["duration"]
        7200
    """

    type: str
    label: str
    language: str
    duration: int | None = None
    time: datetime | None = None
    recurring: tuple[str, ...] | None = None

    def __post_init__(self) -> None:
        if self.type not in VALID_EVENT_TYPES:
            raise ValueError(f"Unknown event type: {self.type!r}")
        if not self.label:
            raise ValueError("label must not be empty")
        if self.duration is not None and self.duration <= 0:
            raise ValueError(f"duration must be positive, got {self.duration}")
        if self.recurring is not None:
            if not self.recurring:
                raise ValueError("recurring must not be empty when set")
            # Accept any sequence, store a tuple
            object.__setattr__(self, "recurring", tuple(self.recurring))

    def to_dict(self) -> dict[str, Any]:
        """Convert event to dictionary for JSON serialization."""
        return {
            "type": self.type,
            "label": self.label,
            "language": self.language,
            "duration": self.duration,
            "time": self.time.isoformat() if self.time else None,
            "recurring": list(self.recurring) if self.recurring else None,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ParsedEvent":
        """
        Create ParsedEvent from dictionary.

        Args:
            data: Dictionary with event fields.

        Returns:
            ParsedEvent instance.

        Raises:
            KeyError: If required fields are missing.
        """
        time = data.get("time")
        if isinstance(time, str):
            time = datetime.fromisoformat(time)

        recurring = data.get("recurring")
        return cls(
            type=data["type"],
            label=data["label"],
            language=data["language"],
            duration=data.get("duration"),
            time=time,
            recurring=tuple(recurring) if recurring else None,
        )
