"""SQLAlchemy adapter – SqlAlchemyDeliveryLedger."""
from __future__ import annotations

from datetime import UTC, datetime
from typing import Any, Callable

from sqlalchemy import false, insert, select, update
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from aircraft_events.adapters.sqlalchemy.models import DomainEventDeliveryModel as Row
from aircraft_events.kernel.errors import NotFoundError, describe_error
from aircraft_events.kernel.events import DomainEvent
from aircraft_events.kernel.messaging import (
    DEFAULT_MAX_ATTEMPTS,
    DEFAULT_REPLAY_LIMIT,
    DeliveryLedger,
    DeliveryRecord,
    DeliveryState,
    PendingDelivery,
    check_pending_window,
)
from aircraft_events.kernel.time import Clock, SystemClock

_UPSERT_INSERTS: dict[str, Callable[..., Any]] = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


class SqlAlchemyDeliveryLedger(DeliveryLedger):
    """Async SQLAlchemy delivery ledger.

    Every operation runs in its own short transaction and touches exactly one
    row, so each event's lifecycle can be retried independently.

    Parameters
    ----------
    session_factory:
        Zero-argument callable returning an
        :class:`~sqlalchemy.ext.asyncio.AsyncSession` (an ``async_sessionmaker``
        or :class:`SqlAlchemySessionFactory`).
    clock:
        Source of ``created_at`` / ``published_at`` timestamps.
    """

    def __init__(self, session_factory: Callable[[], AsyncSession], clock: Clock | None = None) -> None:
        self._sessions = session_factory
        self._clock = clock or SystemClock()

    async def ensure_delivery_record(self, event: DomainEvent) -> DeliveryState:
        values = {
            "event_id": event.id,
            "event_type": event.event_type,
            "source": event.source,
            "attempts": 0,
            "published": False,
            "payload": event.to_payload(),
            "created_at": self._clock.now(),
        }
        async with self._sessions() as session, session.begin():
            await self._insert_if_absent(session, values)
            published = (
                await session.execute(select(Row.published).where(Row.event_id == event.id))
            ).scalar_one()
        return DeliveryState(published=bool(published))

    async def mark_attempt(self, event_id: str) -> None:
        async with self._sessions() as session, session.begin():
            result = await session.execute(
                update(Row).where(Row.event_id == event_id).values(attempts=Row.attempts + 1)
            )
            if result.rowcount == 0:
                raise NotFoundError("DeliveryRecord", event_id)

    async def mark_published(self, event_id: str) -> None:
        async with self._sessions() as session, session.begin():
            result = await session.execute(
                update(Row)
                .where(Row.event_id == event_id, Row.published == false())
                .values(published=True, last_error=None, published_at=self._clock.now())
            )
            if result.rowcount == 0:
                await self._require(session, event_id)

    async def mark_failed(self, event_id: str, error: object) -> None:
        async with self._sessions() as session, session.begin():
            result = await session.execute(
                update(Row).where(Row.event_id == event_id).values(last_error=describe_error(error))
            )
            if result.rowcount == 0:
                raise NotFoundError("DeliveryRecord", event_id)

    async def list_pending_deliveries(
        self,
        limit: int = DEFAULT_REPLAY_LIMIT,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    ) -> list[PendingDelivery]:
        check_pending_window(limit, max_attempts)
        stmt = (
            select(Row.event_id, Row.event_type, Row.attempts, Row.payload)
            .where(Row.published == false(), Row.attempts < max_attempts)
            .order_by(Row.created_at.asc())
            .limit(limit)
        )
        async with self._sessions() as session:
            rows = (await session.execute(stmt)).all()
        return [
            PendingDelivery(
                event_id=row.event_id,
                event_type=row.event_type,
                attempts=row.attempts,
                payload=row.payload,
            )
            for row in rows
        ]

    async def get(self, event_id: str) -> DeliveryRecord | None:
        async with self._sessions() as session:
            row = await session.get(Row, event_id)
        if row is None:
            return None
        return DeliveryRecord(
            event_id=row.event_id,
            event_type=row.event_type,
            source=row.source,
            payload=row.payload,
            created_at=_aware(row.created_at),
            attempts=row.attempts,
            published=row.published,
            last_error=row.last_error,
            published_at=_aware(row.published_at) if row.published_at is not None else None,
        )

    async def _insert_if_absent(self, session: AsyncSession, values: dict[str, Any]) -> None:
        dialect = session.get_bind().dialect.name
        upsert = _UPSERT_INSERTS.get(dialect)
        if upsert is not None:
            stmt = upsert(Row).values(**values).on_conflict_do_nothing(index_elements=["event_id"])
            await session.execute(stmt)
            return
        # No native upsert: a concurrent duplicate surfaces as a unique violation.
        try:
            async with session.begin_nested():
                await session.execute(insert(Row).values(**values))
        except IntegrityError:
            pass

    async def _require(self, session: AsyncSession, event_id: str) -> None:
        found = (
            await session.execute(select(Row.event_id).where(Row.event_id == event_id))
        ).scalar_one_or_none()
        if found is None:
            raise NotFoundError("DeliveryRecord", event_id)


def _aware(value: datetime) -> datetime:
    # SQLite drops tzinfo on the way back.
    return value if value.tzinfo is not None else value.replace(tzinfo=UTC)


__all__ = ["SqlAlchemyDeliveryLedger"]
