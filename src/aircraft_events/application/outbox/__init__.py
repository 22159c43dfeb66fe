"""Application outbox – publish coordinator and replay job."""
from aircraft_events.application.outbox.coordinator import DEFAULT_PUBLISH_TIMEOUT_SECONDS, PublishCoordinator
from aircraft_events.application.outbox.replay import ReplayJob, ReplayOptions, ReplaySummary

__all__ = [
    "DEFAULT_PUBLISH_TIMEOUT_SECONDS",
    "PublishCoordinator",
    "ReplayJob",
    "ReplayOptions",
    "ReplaySummary",
]
