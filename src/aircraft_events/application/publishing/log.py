"""Application publishing – LoggingEventPublisher."""
from __future__ import annotations

from typing import Any

from aircraft_events.kernel.events import DomainEvent
from aircraft_events.kernel.messaging import EventPublisher
from aircraft_events.observability.logging import get_logger


class LoggingEventPublisher(EventPublisher):
    """Delivers events by writing them to the structured log.

    Only fails when the logging sink itself raises.
    """

    def __init__(self, logger: Any | None = None) -> None:
        self._logger = logger or get_logger(__name__)

    async def publish(self, event: DomainEvent) -> None:
        self._logger.info(
            "domain_event.published",
            event_id=event.id,
            event_type=event.event_type,
            payload=event.to_payload(),
        )

    async def publish_batch(self, events: list[DomainEvent]) -> None:
        for event in events:
            await self.publish(event)


__all__ = ["LoggingEventPublisher"]
