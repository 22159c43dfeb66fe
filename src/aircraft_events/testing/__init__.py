"""Testing support – in-memory ledger, recording publishers, frozen clock."""

from aircraft_events.testing.fakes import (
    FailingEventPublisher,
    FakeClock,
    FrozenClock,
    InMemoryDeliveryLedger,
    RecordingEventPublisher,
)

__all__ = [
    "FailingEventPublisher",
    "FakeClock",
    "FrozenClock",
    "InMemoryDeliveryLedger",
    "RecordingEventPublisher",
]
