"""Application outbox – ReplayJob re-drives deliveries stuck in the ledger."""
from __future__ import annotations

import dataclasses
from typing import Any

from aircraft_events.application.outbox.coordinator import DEFAULT_PUBLISH_TIMEOUT_SECONDS
from aircraft_events.kernel.errors import InvalidPayloadError, ValidationError, describe_error
from aircraft_events.kernel.events import DomainEvent
from aircraft_events.kernel.messaging import (
    DEFAULT_MAX_ATTEMPTS,
    DEFAULT_REPLAY_LIMIT,
    DeliveryLedger,
    EventPublisher,
    PendingDelivery,
)
from aircraft_events.observability.logging import get_logger
from aircraft_events.resilience.timeouts import TimeoutPolicy

logger = get_logger(__name__)


@dataclasses.dataclass(frozen=True)
class ReplayOptions:
    dry_run: bool = False
    replay_limit: int = DEFAULT_REPLAY_LIMIT
    max_attempts: int = DEFAULT_MAX_ATTEMPTS

    def __post_init__(self) -> None:
        if self.replay_limit <= 0:
            raise ValidationError("replay_limit must be a positive integer", field="replay_limit")
        if self.max_attempts <= 0:
            raise ValidationError("max_attempts must be a positive integer", field="max_attempts")


@dataclasses.dataclass
class ReplaySummary:
    scanned: int = 0
    replayed: int = 0
    failed: int = 0
    invalid_payload: int = 0

    def to_dict(self) -> dict[str, int]:
        return {
            "scanned": self.scanned,
            "replayed": self.replayed,
            "failed": self.failed,
            "invalidPayload": self.invalid_payload,
        }


class ReplayJob:
    """Batch re-delivery of unpublished events below the retry ceiling.

    Candidates are processed oldest first. One failing event never stops the
    batch; an invalid stored payload is recorded and skipped without a
    publish. Invalid payloads count toward both ``failed`` and
    ``invalid_payload``.

    Re-running the job converges: published rows drop out of the pending
    scan. A publish that reached the channel but whose ``mark_published``
    write was lost is delivered again on the next run, so consumers must
    dedupe on event id.
    """

    def __init__(
        self,
        ledger: DeliveryLedger,
        publisher: EventPublisher,
        options: ReplayOptions | None = None,
        publish_timeout: float = DEFAULT_PUBLISH_TIMEOUT_SECONDS,
    ) -> None:
        self._ledger = ledger
        self._publisher = publisher
        self._options = options or ReplayOptions()
        self._timeout = TimeoutPolicy(publish_timeout)

    async def run(self) -> ReplaySummary:
        options = self._options
        pending = await self._ledger.list_pending_deliveries(
            limit=options.replay_limit,
            max_attempts=options.max_attempts,
        )
        summary = ReplaySummary(scanned=len(pending))

        logger.info(
            "replay.started",
            mode="dry-run" if options.dry_run else "replay",
            replay_limit=options.replay_limit,
            max_attempts=options.max_attempts,
            pending=len(pending),
        )

        for delivery in pending:
            if options.dry_run:
                logger.info(
                    "replay.dry_run_candidate",
                    event_id=delivery.event_id,
                    event_type=delivery.event_type,
                    attempts=delivery.attempts,
                )
                continue
            await self._replay_one(delivery, summary)

        logger.info("replay.completed", summary=summary.to_dict())
        return summary

    async def _replay_one(self, delivery: PendingDelivery, summary: ReplaySummary) -> None:
        log = logger.bind(event_id=delivery.event_id, event_type=delivery.event_type)
        await self._ledger.mark_attempt(delivery.event_id)

        try:
            event = DomainEvent.from_payload(delivery.payload, event_id=delivery.event_id)
        except InvalidPayloadError as exc:
            await self._ledger.mark_failed(delivery.event_id, exc)
            summary.invalid_payload += 1
            summary.failed += 1
            log.error("replay.invalid_payload", error=describe_error(exc), errors=_loc_only(exc.errors))
            return

        try:
            await self._timeout.execute(lambda: self._publisher.publish(event))
        except Exception as exc:  # noqa: BLE001
            await self._ledger.mark_failed(delivery.event_id, exc)
            summary.failed += 1
            log.error("replay.publish_failed", error=describe_error(exc))
            return

        await self._ledger.mark_published(delivery.event_id)
        summary.replayed += 1


def _loc_only(errors: list[dict[str, Any]]) -> list[str]:
    return [".".join(str(part) for part in e.get("loc", ())) + f": {e.get('msg', '')}" for e in errors]


__all__ = ["ReplayJob", "ReplayOptions", "ReplaySummary"]
