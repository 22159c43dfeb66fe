"""Settings for the event delivery pipeline."""
from __future__ import annotations

import dataclasses
from typing import Any, Sequence

from aircraft_events.config.settings import DotenvSettingsLoader, Settings, SettingsFactory, SettingsLoader

PUBLISHER_KINDS = frozenset({"noop", "log", "eventbridge"})
LOG_LEVELS = frozenset({"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"})


@dataclasses.dataclass
class EventSettings(Settings):
    """Environment-driven configuration (``EVENT_PUBLISHER``, ``DATABASE_URL`` …)."""

    database_url: str = "sqlite+aiosqlite:///./aircraft_events.db"
    log_level: str = "INFO"
    event_publisher: str = "log"
    event_source: str = "aircraft-dashboard.backend"
    eventbridge_event_bus_name: str = "aircraft-dashboard-bus"
    aws_region: str = "us-east-1"
    aws_eventbridge_endpoint: str | None = None
    event_publish_timeout_seconds: float = 5.0
    admin_job_event_replay_limit: int = 50
    admin_job_event_replay_max_attempts: int = 10

    def _validate(self) -> None:
        self.event_publisher = self.event_publisher.lower()
        self.log_level = self.log_level.upper()
        self._require_choice("event_publisher", PUBLISHER_KINDS)
        self._require_choice("log_level", LOG_LEVELS)
        self._require_non_empty("database_url", "event_source")
        self._require_positive(
            "event_publish_timeout_seconds",
            "admin_job_event_replay_limit",
            "admin_job_event_replay_max_attempts",
        )


def load_event_settings(
    loaders: Sequence[SettingsLoader] | None = None,
    overrides: dict[str, Any] | None = None,
) -> EventSettings:
    """Build :class:`EventSettings` from ``.env`` + environment, then *overrides*."""
    if loaders is None:
        loaders = [DotenvSettingsLoader()]
    return SettingsFactory.create(EventSettings, loaders=loaders, overrides=overrides)


__all__ = ["LOG_LEVELS", "PUBLISHER_KINDS", "EventSettings", "load_event_settings"]
