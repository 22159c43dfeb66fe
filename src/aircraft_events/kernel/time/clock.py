"""Kernel time – the clock behind ledger timestamps."""
from __future__ import annotations

from datetime import UTC, datetime, timedelta
from typing import Protocol


class Clock(Protocol):
    """Port: source of tz-aware UTC instants."""

    def now(self) -> datetime: ...


class SystemClock:
    def now(self) -> datetime:
        return datetime.now(UTC)


class FrozenClock:
    """Clock that only moves when told to.

    The instant is stored in UTC; a naive datetime is rejected because the
    ledger compares ``created_at`` values across rows.
    """

    def __init__(self, fixed: datetime) -> None:
        if fixed.tzinfo is None:
            raise ValueError(f"FrozenClock needs a timezone-aware datetime, got {fixed!r}")
        self._fixed = fixed.astimezone(UTC)

    def now(self) -> datetime:
        return self._fixed

    def advance(self, **kwargs: int | float) -> None:
        """Move the clock by ``timedelta(**kwargs)``; negative deltas go back."""
        self._fixed += timedelta(**kwargs)


__all__ = ["Clock", "FrozenClock", "SystemClock"]
