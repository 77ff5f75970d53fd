"""Presentation helpers for parsed events."""

from datetime import datetime, time


def split_duration(seconds: int) -> tuple[int, int, int]:
    """
    Split a second count into (hours, minutes, seconds).

    These are the components ``format_duration`` displays, so
    ``h * 3600 + m * 60 + s == seconds`` always holds.

    Raises:
        ValueError: If ``seconds`` is negative.
    """
    if seconds < 0:
        raise ValueError(f"seconds must be non-negative, got {seconds}")
    hours, rest = divmod(seconds, 3600)
    minutes, secs = divmod(rest, 60)
    return hours, minutes, secs


def format_duration(seconds: int) -> str:
    """
    Format a duration for display.

    Examples:
        >>> format_duration(5400)
        '1h 30m'
        >>> format_duration(90)
        '1:30'
        >>> format_duration(45)
        '45s'
    """
    hours, minutes, secs = split_duration(seconds)
    if hours > 0:
        return f"{hours}h {minutes:02d}m"
    if minutes > 0:
        return f"{minutes}:{secs:02d}"
    return f"{secs}s"


def format_countdown(seconds: int) -> str:
    """Format remaining time as ``H:MM:SS``, or ``M:SS`` under an hour."""
    hours, minutes, secs = split_duration(seconds)
    if hours > 0:
        return f"{hours}:{minutes:02d}:{secs:02d}"
    return f"{minutes}:{secs:02d}"


def format_time(value: datetime | time) -> str:
    """
    Format a clock reading as ``H:MM AM`` / ``H:MM PM``.

    Uses the value's own hour and minute fields; no locale or timezone
    conversion is applied.
    """
    hour = value.hour % 12 or 12
    period = "AM" if value.hour < 12 else "PM"
    return f"{hour}:{value.minute:02d} {period}"
