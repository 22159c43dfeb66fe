"""Kernel messaging – delivery ledger port (transactional outbox)."""
from __future__ import annotations

import abc
import dataclasses
from datetime import datetime
from typing import Any

from aircraft_events.kernel.errors import ValidationError
from aircraft_events.kernel.events import DomainEvent

DEFAULT_REPLAY_LIMIT = 50
DEFAULT_MAX_ATTEMPTS = 10


def check_pending_window(limit: int, max_attempts: int) -> None:
    """Reject a non-positive *limit* or *max_attempts* for a pending scan."""
    if limit <= 0:
        raise ValidationError(f"limit must be a positive integer, got {limit}", field="limit")
    if max_attempts <= 0:
        raise ValidationError(
            f"max_attempts must be a positive integer, got {max_attempts}", field="max_attempts"
        )


@dataclasses.dataclass
class DeliveryRecord:
    """Publish lifecycle of one domain event, keyed by the event id."""

    event_id: str
    event_type: str
    source: str
    payload: dict[str, Any]
    created_at: datetime
    attempts: int = 0
    published: bool = False
    last_error: str | None = None
    published_at: datetime | None = None


@dataclasses.dataclass(frozen=True)
class DeliveryState:
    """Result of :meth:`DeliveryLedger.ensure_delivery_record`."""

    published: bool


@dataclasses.dataclass(frozen=True)
class PendingDelivery:
    """Replay candidate returned by :meth:`DeliveryLedger.list_pending_deliveries`."""

    event_id: str
    event_type: str
    attempts: int
    payload: Any


class DeliveryLedger(abc.ABC):
    """Port: durable, idempotent bookkeeping for event delivery.

    The ledger is the only component that reads or writes delivery records.
    Every operation touches a single row and is atomic on its own.
    """

    @abc.abstractmethod
    async def ensure_delivery_record(self, event: DomainEvent) -> DeliveryState:
        """Create the record for ``event.id`` unless it exists.

        An existing record is returned untouched. Concurrent callers with the
        same event id end up sharing one record.
        """

    @abc.abstractmethod
    async def mark_attempt(self, event_id: str) -> None:
        """Increment ``attempts``; raise ``NotFoundError`` when no record exists."""

    @abc.abstractmethod
    async def mark_published(self, event_id: str) -> None:
        """Flag the record as published, clear ``last_error``, stamp ``published_at`` once."""

    @abc.abstractmethod
    async def mark_failed(self, event_id: str, error: object) -> None:
        """Store a truncated description of *error* in ``last_error``."""

    @abc.abstractmethod
    async def list_pending_deliveries(
        self,
        limit: int = DEFAULT_REPLAY_LIMIT,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    ) -> list[PendingDelivery]:
        """Unpublished records below *max_attempts*, oldest first, at most *limit*.

        Raises ``ValidationError`` when either bound is not positive.
        """

    @abc.abstractmethod
    async def get(self, event_id: str) -> DeliveryRecord | None: ...


__all__ = [
    "DEFAULT_MAX_ATTEMPTS",
    "DEFAULT_REPLAY_LIMIT",
    "DeliveryLedger",
    "DeliveryRecord",
    "DeliveryState",
    "PendingDelivery",
    "check_pending_window",
]
