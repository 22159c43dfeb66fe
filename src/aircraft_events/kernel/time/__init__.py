"""Kernel time – Clock port + implementations."""
from aircraft_events.kernel.time.clock import Clock, FrozenClock, SystemClock

__all__ = ["Clock", "FrozenClock", "SystemClock"]
