"""Shared fixtures: ledger harnesses and event builders.

Every ledger-facing test runs against both the in-memory fake and the
SQLAlchemy ledger on an in-memory SQLite database (aiosqlite).
"""

from __future__ import annotations

import contextlib
import dataclasses
from collections.abc import AsyncIterator, Callable
from typing import Any

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from aircraft_events.adapters.sqlalchemy import (
    DomainEventDeliveryModel,
    SqlAlchemyDeliveryLedger,
    create_schema,
)
from aircraft_events.kernel.events import ActorRole, DomainEvent, DomainEventType, EventMeta
from aircraft_events.kernel.messaging import DeliveryLedger, DeliveryRecord
from aircraft_events.kernel.time import FrozenClock
from aircraft_events.testing.fakes import FakeClock, InMemoryDeliveryLedger


@dataclasses.dataclass
class LedgerHarness:
    """A ledger plus a back door for seeding raw rows."""

    ledger: DeliveryLedger
    clock: FrozenClock
    put_raw: Callable[[DeliveryRecord], Any]


@contextlib.asynccontextmanager
async def _memory_harness() -> AsyncIterator[LedgerHarness]:
    clock = FakeClock()
    ledger = InMemoryDeliveryLedger(clock=clock)

    async def put_raw(record: DeliveryRecord) -> None:
        ledger.put(record)

    yield LedgerHarness(ledger=ledger, clock=clock, put_raw=put_raw)


@contextlib.asynccontextmanager
async def _sqlalchemy_harness() -> AsyncIterator[LedgerHarness]:
    engine = create_async_engine("sqlite+aiosqlite:///:memory:", echo=False)
    await create_schema(engine)
    sessions = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    clock = FakeClock()

    async def put_raw(record: DeliveryRecord) -> None:
        async with sessions() as session, session.begin():
            session.add(DomainEventDeliveryModel(**dataclasses.asdict(record)))

    try:
        yield LedgerHarness(
            ledger=SqlAlchemyDeliveryLedger(sessions, clock=clock),
            clock=clock,
            put_raw=put_raw,
        )
    finally:
        await engine.dispose()


@pytest.fixture(params=["memory", "sqlalchemy"])
def open_ledger(request: pytest.FixtureRequest) -> Callable[[], contextlib.AbstractAsyncContextManager[LedgerHarness]]:
    """Return a factory; use as ``async with open_ledger() as h: ...``."""
    if request.param == "memory":
        return _memory_harness
    return _sqlalchemy_harness


def make_event(
    event_type: DomainEventType = DomainEventType.AIRCRAFT_STATUS_CHANGED,
    aircraft_id: str = "ac-001",
    **overrides: Any,
) -> DomainEvent:
    fields: dict[str, Any] = {
        "type": event_type,
        "source": "aircraft-dashboard.backend",
        "detail": {
            "aircraftId": aircraft_id,
            "tailNumber": "N250AL",
            "previousPhase": "Flight Testing",
            "newPhase": "Certification",
        },
        "meta": EventMeta(actor_id="user-1", actor_email="ops@example.com", actor_role=ActorRole.INTERNAL),
    }
    fields.update(overrides)
    return DomainEvent(**fields)


@pytest.fixture
def event_factory() -> Callable[..., DomainEvent]:
    return make_event
