"""Schema definitions for events tracked on the timer board.

An ActiveEvent wraps an immutable ParsedEvent with the mutable countdown
state the parser knows nothing about.
"""

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

from src.nlp.schemas import ParsedEvent

# Event types that count down
COUNTDOWN_TYPES: frozenset[str] = frozenset({"timer", "pomodoro"})


@dataclass
class ActiveEvent:
    """A scheduled event with its live countdown state.

    Attributes:
        parsed: The parse result this event was created from (never mutated).
        event_id: UUID4 identifier.
        start_time: When the countdown was created or last reset.
        remaining_seconds: Seconds left; starts at the parsed duration or 0.
        is_paused: Whether ticks are currently ignored.
        is_complete: Whether the countdown has reached zero.
    """

    parsed: ParsedEvent
    event_id: str = field(default_factory=lambda: str(uuid.uuid4()))
    start_time: datetime = field(
        default_factory=lambda: datetime.now(timezone.utc)
    )
    remaining_seconds: int = -1
    is_paused: bool = False
    is_complete: bool = False

    def __post_init__(self) -> None:
        if self.remaining_seconds < 0:
            self.remaining_seconds = self.parsed.duration or 0

    @property
    def type(self) -> str:
        return self.parsed.type

    @property
    def label(self) -> str:
        return self.parsed.label

    @property
    def counts_down(self) -> bool:
        """Whether ticks apply to this event."""
        return self.parsed.type in COUNTDOWN_TYPES

    @property
    def progress(self) -> float:
        """Elapsed share of the duration as a percentage (0 without a duration)."""
        duration = self.parsed.duration
        if not duration:
            return 0.0
        return (duration - self.remaining_seconds) / duration * 100

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dictionary."""
        return {
            **self.parsed.to_dict(),
            "event_id": self.event_id,
            "start_time": self.start_time.isoformat(),
            "remaining_seconds": self.remaining_seconds,
            "is_paused": self.is_paused,
            "is_complete": self.is_complete,
        }
