"""EventBridge adapter – domain event publisher."""
from aircraft_events.adapters.eventbridge.publisher import (
    MAX_ENTRIES_PER_REQUEST,
    EventBridgeConfig,
    EventBridgePublisher,
)

__all__ = ["MAX_ENTRIES_PER_REQUEST", "EventBridgeConfig", "EventBridgePublisher"]
