"""Testing fakes – in-memory doubles for kernel ports."""
from aircraft_events.kernel.time import FrozenClock
from aircraft_events.testing.fakes.clock import FAKE_EPOCH, FakeClock
from aircraft_events.testing.fakes.ledger import InMemoryDeliveryLedger
from aircraft_events.testing.fakes.publisher import FailingEventPublisher, RecordingEventPublisher

__all__ = [
    "FAKE_EPOCH",
    "FailingEventPublisher",
    "FakeClock",
    "FrozenClock",
    "InMemoryDeliveryLedger",
    "RecordingEventPublisher",
]
