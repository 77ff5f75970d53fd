"""Notification dispatcher fanning completion notices out to channels.

Notification failures never propagate to the countdown loop: a channel
that raises or returns False is logged and reported as undelivered.
"""

import logging

from src.timers.channels import NotificationChannel
from src.timers.schemas import ActiveEvent

logger = logging.getLogger(__name__)


class NotificationDispatcher:
    """Delivers completion notices to every configured channel.

    Args:
        channels: Channels to deliver through, in order.
        enabled: Permission gate. A disabled dispatcher delivers nothing.
    """

    def __init__(
        self,
        channels: list[NotificationChannel],
        enabled: bool = True,
    ) -> None:
        self._channels = list(channels)
        self._enabled = enabled

    @property
    def channels(self) -> list[NotificationChannel]:
        """Access configured channels (for inspection/testing)."""
        return self._channels

    @property
    def enabled(self) -> bool:
        return self._enabled

    async def dispatch(self, event: ActiveEvent) -> list[tuple[str, bool]]:
        """Send a completion notice to all channels.

        Args:
            event: The event that completed.

        Returns:
            List of (channel_name, success) tuples; empty when disabled.
        """
        if not self._enabled:
            logger.debug("Notifications disabled, skipping %s", event.event_id)
            return []

        results: list[tuple[str, bool]] = []
        for channel in self._channels:
            try:
                success = await channel.send(event)
            except Exception as e:
                logger.warning(
                    "Channel %s failed for event %s: %s",
                    channel.name, event.event_id, e,
                )
                success = False
            results.append((channel.name, success))

        return results

    async def dispatch_batch(self, events: list[ActiveEvent]) -> list[list[tuple[str, bool]]]:
        """Send a notice for each completed event, in order."""
        return [await self.dispatch(event) for event in events]
