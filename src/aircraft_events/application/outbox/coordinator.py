"""Application outbox – PublishCoordinator."""
from __future__ import annotations

from typing import Any, Awaitable

from aircraft_events.kernel.errors import describe_error
from aircraft_events.kernel.events import DomainEvent
from aircraft_events.kernel.messaging import DeliveryLedger, EventPublisher
from aircraft_events.observability.logging import get_logger
from aircraft_events.resilience.timeouts import TimeoutPolicy

logger = get_logger(__name__)

DEFAULT_PUBLISH_TIMEOUT_SECONDS = 5.0


class PublishCoordinator:
    """Record-then-publish glue between a state mutation and the outbox.

    :meth:`publish_safely` never raises: a publish failure is written to the
    ledger and left for :class:`~aircraft_events.application.outbox.ReplayJob`
    to re-drive, so the business mutation that produced the event commits
    regardless of the channel's health.

    Parameters
    ----------
    ledger:
        Delivery ledger that owns the per-event record.
    publisher:
        Channel the event is forwarded to.
    publish_timeout:
        Seconds a single publish may take before it counts as failed.
    """

    def __init__(
        self,
        ledger: DeliveryLedger,
        publisher: EventPublisher,
        publish_timeout: float = DEFAULT_PUBLISH_TIMEOUT_SECONDS,
    ) -> None:
        self._ledger = ledger
        self._publisher = publisher
        self._timeout = TimeoutPolicy(publish_timeout)

    async def publish_safely(self, event: DomainEvent) -> None:
        log = logger.bind(event_id=event.id, event_type=event.event_type)

        try:
            state = await self._ledger.ensure_delivery_record(event)
            if state.published:
                log.info("domain_event.duplicate_skipped")
                return
            await self._ledger.mark_attempt(event.id)
        except Exception as exc:  # noqa: BLE001
            log.error("domain_event.ledger_unavailable", error=describe_error(exc), payload=event.to_payload())
            return

        try:
            await self._timeout.execute(lambda: self._publisher.publish(event))
        except Exception as exc:  # noqa: BLE001
            log.error("domain_event.publish_failed", error=describe_error(exc))
            await self._record(self._ledger.mark_failed(event.id, exc), log)
            return

        await self._record(self._ledger.mark_published(event.id), log)

    async def _record(self, write: Awaitable[None], log: Any) -> None:
        # The event stays pending (or is re-sent) when the outcome write is lost.
        try:
            await write
        except Exception as exc:  # noqa: BLE001
            log.error("domain_event.outcome_not_recorded", error=describe_error(exc))


__all__ = ["DEFAULT_PUBLISH_TIMEOUT_SECONDS", "PublishCoordinator"]
