"""Resilience – timeout policies."""
from aircraft_events.resilience.timeouts.policy import TimeoutPolicy

__all__ = ["TimeoutPolicy"]
