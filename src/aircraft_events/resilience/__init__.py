"""Resilience – timeouts."""

from aircraft_events.resilience.timeouts import TimeoutPolicy

__all__ = ["TimeoutPolicy"]
