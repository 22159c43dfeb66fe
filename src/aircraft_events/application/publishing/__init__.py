"""Application publishing – no-op, log and configured publishers."""
from aircraft_events.application.publishing.factory import create_event_publisher
from aircraft_events.application.publishing.log import LoggingEventPublisher
from aircraft_events.application.publishing.noop import NoopEventPublisher

__all__ = ["LoggingEventPublisher", "NoopEventPublisher", "create_event_publisher"]
