"""
Command-line interface for smart-scheduler.

Parses free-text scheduling requests and runs countdowns for timers and
pomodoro sessions.

Usage:
    smart-scheduler parse "Meeting tomorrow at 2:30 PM"
    smart-scheduler parse --json "Wake me up at 7am every weekday"
    smart-scheduler countdown "Tea in 3 minutes"
"""

import asyncio
import json
import sys
from datetime import datetime

import click

from src.nlp import format_countdown, format_duration, format_time, parse
from src.nlp.schemas import ParsedEvent
from src.observability.logging import event_context, get_logger, setup_logging
from src.timers import (
    ConsoleChannel,
    LogChannel,
    NotificationChannel,
    NotificationDispatcher,
    TimerBoard,
    TimerConfig,
    WebhookChannel,
)

TYPE_TITLES = {
    "timer": "Timer",
    "alarm": "Alarm",
    "event": "Event",
    "pomodoro": "Pomodoro",
}


def _describe(event: ParsedEvent) -> list[str]:
    """Human-readable lines for a parsed event."""
    lines = [
        f"{TYPE_TITLES[event.type]} • {event.language.upper()}",
        event.label,
    ]
    if event.duration:
        lines.append(f"Duration: {format_duration(event.duration)}")
    if event.time:
        lines.append(f"Time: {format_time(event.time)} ({event.time.date().isoformat()})")
    if event.recurring:
        lines.append(f"Repeats: {', '.join(event.recurring)}")
    return lines


@click.group()
@click.option("--debug", is_flag=True, help="Enable debug logging")
def main(debug: bool) -> None:
    """Smart Scheduler - natural-language timers, alarms and events."""
    setup_logging(level="DEBUG" if debug else None)


@main.command("parse")
@click.argument("text")
@click.option("--json", "as_json", is_flag=True, help="Print the event as JSON")
@click.option(
    "--now",
    default=None,
    type=click.DateTime(formats=["%Y-%m-%dT%H:%M:%S", "%Y-%m-%dT%H:%M", "%Y-%m-%d %H:%M"]),
    help="Reference time for relative expressions (default: local clock)",
)
def parse_command(text: str, as_json: bool, now: datetime | None) -> None:
    """Parse TEXT into a timer, alarm, event or pomodoro."""
    event = parse(text, now=now)

    if event is None:
        if as_json:
            click.echo("null")
        else:
            click.echo("Nothing to schedule")
        return

    if as_json:
        click.echo(json.dumps(event.to_dict(), ensure_ascii=False))
        return

    for line in _describe(event):
        click.echo(line)


@main.command()
@click.argument("text")
@click.option("--tick-seconds", default=None, type=float, help="Wall-clock seconds per tick")
@click.option("--webhook", default=None, help="URL to POST to when the countdown completes")
def countdown(text: str, tick_seconds: float | None, webhook: str | None) -> None:
    """Parse TEXT and count it down, notifying on completion."""
    logger = get_logger(__name__)
    config = TimerConfig()
    interval = tick_seconds if tick_seconds is not None else config.tick_seconds

    event = parse(text)
    if event is None:
        click.echo("Nothing to schedule")
        sys.exit(1)

    for line in _describe(event):
        click.echo(line)

    if not event.duration:
        click.echo(f"{TYPE_TITLES[event.type]}s do not count down")
        sys.exit(1)

    channels: list[NotificationChannel] = [ConsoleChannel(), LogChannel()]
    url = webhook or config.webhook_url
    if url:
        channels.append(WebhookChannel(url, timeout=config.webhook_timeout))
    dispatcher = NotificationDispatcher(channels, enabled=config.notifications_enabled)

    board = TimerBoard()
    active = board.add(event)

    async def run():
        while not active.is_complete:
            await asyncio.sleep(interval)
            completed = board.tick()
            click.echo(format_countdown(active.remaining_seconds))
            if completed:
                results = await dispatcher.dispatch_batch(completed)
                logger.info("Countdown finished", deliveries=results)

    with event_context(active.event_id, event_type=active.type):
        try:
            asyncio.run(run())
        except KeyboardInterrupt:
            click.echo(f"Stopped with {format_countdown(active.remaining_seconds)} left")


if __name__ == "__main__":
    main()
