"""Resilience – TimeoutPolicy."""
from __future__ import annotations

import asyncio
import dataclasses
from typing import Awaitable, Callable, TypeVar

from aircraft_events.kernel.errors import PublishTimeoutError

T = TypeVar("T")


@dataclasses.dataclass(frozen=True)
class TimeoutPolicy:
    """Upper bound on one publish call.

    The awaitable is cancelled when the bound is hit and the caller sees
    :class:`~aircraft_events.kernel.errors.PublishTimeoutError`, which the
    ledger records like any other publish failure.
    """

    timeout_seconds: float

    def __post_init__(self) -> None:
        if self.timeout_seconds <= 0:
            raise ValueError(f"timeout_seconds must be positive, got {self.timeout_seconds}")

    async def execute(self, func: Callable[[], Awaitable[T]]) -> T:
        try:
            return await asyncio.wait_for(func(), timeout=self.timeout_seconds)
        except TimeoutError as exc:
            raise PublishTimeoutError(
                f"Operation timed out after {self.timeout_seconds}s",
                detail={"timeout_seconds": self.timeout_seconds},
            ) from exc


__all__ = ["TimeoutPolicy"]
