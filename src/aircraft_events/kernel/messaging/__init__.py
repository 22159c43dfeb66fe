"""Kernel messaging – delivery ledger and publisher ports."""
from aircraft_events.kernel.messaging.delivery import (
    DEFAULT_MAX_ATTEMPTS,
    DEFAULT_REPLAY_LIMIT,
    DeliveryLedger,
    DeliveryRecord,
    DeliveryState,
    PendingDelivery,
    check_pending_window,
)
from aircraft_events.kernel.messaging.publisher import EventPublisher

__all__ = [
    "DEFAULT_MAX_ATTEMPTS",
    "DEFAULT_REPLAY_LIMIT",
    "DeliveryLedger",
    "DeliveryRecord",
    "DeliveryState",
    "EventPublisher",
    "PendingDelivery",
    "check_pending_window",
]
