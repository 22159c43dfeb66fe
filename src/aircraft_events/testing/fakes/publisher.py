"""Testing fakes – recording and failing event publishers."""
from __future__ import annotations

import asyncio
from collections.abc import Iterable

from aircraft_events.kernel.errors import PublishError
from aircraft_events.kernel.events import DomainEvent
from aircraft_events.kernel.messaging import EventPublisher


class RecordingEventPublisher(EventPublisher):
    """Keeps every published event in ``published``."""

    def __init__(self) -> None:
        self.published: list[DomainEvent] = []
        self.batches: list[list[DomainEvent]] = []
        self.closed = False

    async def publish(self, event: DomainEvent) -> None:
        self.published.append(event)

    async def publish_batch(self, events: list[DomainEvent]) -> None:
        self.batches.append(list(events))
        self.published.extend(events)

    async def aclose(self) -> None:
        self.closed = True

    @property
    def published_ids(self) -> list[str]:
        return [e.id for e in self.published]


class FailingEventPublisher(RecordingEventPublisher):
    """Fails for selected event ids (or every event) and records the rest.

    Parameters
    ----------
    fail_ids:
        Event ids to reject; ``None`` rejects everything.
    error:
        Exception raised on rejection. Defaults to a ``PublishError``.
    delay:
        Seconds to sleep before rejecting, to exercise timeouts.
    """

    def __init__(
        self,
        fail_ids: Iterable[str] | None = None,
        error: BaseException | None = None,
        delay: float = 0.0,
    ) -> None:
        super().__init__()
        self._fail_ids = set(fail_ids) if fail_ids is not None else None
        self._error = error
        self._delay = delay
        self.calls = 0

    async def publish(self, event: DomainEvent) -> None:
        self.calls += 1
        if self._delay:
            await asyncio.sleep(self._delay)
        if self._fail_ids is None or event.id in self._fail_ids:
            raise self._error or PublishError(f"channel rejected {event.id}", error_code="Rejected")
        await super().publish(event)

    async def publish_batch(self, events: list[DomainEvent]) -> None:
        rejected = [e for e in events if self._fail_ids is None or e.id in self._fail_ids]
        if rejected:
            raise self._error or PublishError(f"batch publish failed for {len(rejected)} entries")
        await super().publish_batch(events)


__all__ = ["FailingEventPublisher", "RecordingEventPublisher"]
