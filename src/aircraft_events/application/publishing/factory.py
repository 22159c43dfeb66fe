"""Application publishing – select a publisher from settings."""
from __future__ import annotations

from aircraft_events.adapters.eventbridge import EventBridgeConfig, EventBridgePublisher
from aircraft_events.application.publishing.log import LoggingEventPublisher
from aircraft_events.application.publishing.noop import NoopEventPublisher
from aircraft_events.config import EventSettings
from aircraft_events.kernel.messaging import EventPublisher


def create_event_publisher(settings: EventSettings) -> EventPublisher:
    """Build the publisher named by ``settings.event_publisher``."""
    if settings.event_publisher == "eventbridge":
        return EventBridgePublisher(
            EventBridgeConfig(
                bus_name=settings.eventbridge_event_bus_name,
                region=settings.aws_region,
                endpoint_url=settings.aws_eventbridge_endpoint,
            )
        )
    if settings.event_publisher == "log":
        return LoggingEventPublisher()
    return NoopEventPublisher()


__all__ = ["create_event_publisher"]
