"""Kernel – framework-agnostic building blocks."""

from aircraft_events.kernel.errors import (
    ApplicationError,
    BaseError,
    DomainError,
    InfrastructureError,
    InvalidPayloadError,
    NotFoundError,
    PublishError,
    PublishTimeoutError,
    ValidationError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "DomainError",
    "InfrastructureError",
    "InvalidPayloadError",
    "NotFoundError",
    "PublishError",
    "PublishTimeoutError",
    "ValidationError",
]
