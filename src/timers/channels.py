"""Where completion notices go when a countdown reaches zero.

Every channel answers ``send(event) -> bool``. A channel signals a failed
delivery by returning False; raising is tolerated but the dispatcher treats
it the same way.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any

import click
import httpx

from src.timers.schemas import ActiveEvent

logger = logging.getLogger(__name__)


def completion_message(event: ActiveEvent) -> tuple[str, str]:
    """Title and body for a completion notification."""
    return f"{event.label} is complete!", f"Your {event.type} has finished."


class NotificationChannel(ABC):
    """A destination for completion notices."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Short identifier reported in dispatch results."""

    @abstractmethod
    async def send(self, event: ActiveEvent) -> bool:
        """Deliver the notice for ``event``; False when it did not get through."""


class LogChannel(NotificationChannel):
    """Writes completion notices to the application log."""

    name = "log"

    async def send(self, event: ActiveEvent) -> bool:
        title, body = completion_message(event)
        logger.info("%s %s (event_id=%s)", title, body, event.event_id)
        return True


class ConsoleChannel(NotificationChannel):
    """Echoes completion notices to the terminal, optionally ringing the bell."""

    name = "console"

    def __init__(self, bell: bool = True) -> None:
        self._bell = bell

    async def send(self, event: ActiveEvent) -> bool:
        title, body = completion_message(event)
        click.echo(("\a" if self._bell else "") + f"{title} {body}")
        return True


class WebhookChannel(NotificationChannel):
    """
    POSTs completion notices as JSON.

    Args:
        url: Endpoint receiving the notice.
        headers: Extra request headers, e.g. an auth token.
        timeout: Per-request timeout in seconds.
        client: Shared client to reuse across sends. Without one, a
            short-lived client is opened for each notice.

    Payload:
        {"title": "Tea is complete!", "message": "Your timer has finished.",
         "event": {...ActiveEvent.to_dict()...}}
    """

    name = "webhook"

    def __init__(
        self,
        url: str,
        headers: dict[str, str] | None = None,
        timeout: float = 10.0,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self.url = url
        self._headers = dict(headers or {})
        self._timeout = timeout
        self._client = client

    def payload(self, event: ActiveEvent) -> dict[str, Any]:
        title, body = completion_message(event)
        return {"title": title, "message": body, "event": event.to_dict()}

    async def _post(self, client: httpx.AsyncClient, event: ActiveEvent) -> httpx.Response:
        return await client.post(
            self.url,
            json=self.payload(event),
            headers=self._headers,
            timeout=self._timeout,
        )

    async def send(self, event: ActiveEvent) -> bool:
        try:
            if self._client is not None:
                response = await self._post(self._client, event)
            else:
                async with httpx.AsyncClient() as client:
                    response = await self._post(client, event)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.warning(
                "Webhook %s rejected event %s with status %d",
                self.url, event.event_id, e.response.status_code,
            )
            return False
        except httpx.TimeoutException:
            logger.warning("Webhook %s timed out for event %s", self.url, event.event_id)
            return False
        except httpx.HTTPError as e:
            logger.warning("Webhook %s unreachable for event %s: %s", self.url, event.event_id, e)
            return False

        return True
