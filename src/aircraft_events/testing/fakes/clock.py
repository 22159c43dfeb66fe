"""Testing fakes – FakeClock."""
from __future__ import annotations

from datetime import UTC, datetime

from aircraft_events.kernel.time import FrozenClock

FAKE_EPOCH = datetime(2026, 1, 1, 12, 0, tzinfo=UTC)


class FakeClock(FrozenClock):
    """``FrozenClock`` that starts at :data:`FAKE_EPOCH` unless told otherwise."""

    def __init__(self, start: datetime = FAKE_EPOCH) -> None:
        super().__init__(start)


__all__ = ["FAKE_EPOCH", "FakeClock"]
