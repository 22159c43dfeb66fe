"""Kernel messaging – event publisher port."""
from __future__ import annotations

import abc

from aircraft_events.kernel.events import DomainEvent


class EventPublisher(abc.ABC):
    """Port: forward domain events to an external channel.

    Implementations raise :class:`~aircraft_events.kernel.errors.PublishError`
    whenever the channel does not confirm delivery; they never swallow
    failures.
    """

    @abc.abstractmethod
    async def publish(self, event: DomainEvent) -> None: ...

    @abc.abstractmethod
    async def publish_batch(self, events: list[DomainEvent]) -> None:
        """Deliver *events* in one logical call.

        A partial rejection fails the whole call.
        """

    async def aclose(self) -> None:
        """Release any client held by the publisher."""


__all__ = ["EventPublisher"]
