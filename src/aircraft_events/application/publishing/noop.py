"""Application publishing – NoopEventPublisher."""
from __future__ import annotations

from aircraft_events.kernel.events import DomainEvent
from aircraft_events.kernel.messaging import EventPublisher


class NoopEventPublisher(EventPublisher):
    """Accepts every event and does nothing; used when delivery is disabled."""

    async def publish(self, event: DomainEvent) -> None:
        return None

    async def publish_batch(self, events: list[DomainEvent]) -> None:
        return None


__all__ = ["NoopEventPublisher"]
