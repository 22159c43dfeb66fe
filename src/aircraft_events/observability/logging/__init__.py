"""Observability – structured logging helpers."""
from aircraft_events.observability.logging.factory import JsonLoggerFactory
from aircraft_events.observability.logging.filters import DEFAULT_SENSITIVE_FIELDS, SensitiveFieldsFilter
from aircraft_events.observability.logging.processors import get_logger

__all__ = [
    "DEFAULT_SENSITIVE_FIELDS",
    "JsonLoggerFactory",
    "SensitiveFieldsFilter",
    "get_logger",
]
