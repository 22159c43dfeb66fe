"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError          (domain.py)
    │   ├── ValidationError
    │   └── NotFoundError
    ├── ApplicationError     (application.py)
    │   └── ConfigError      (config.validation)
    └── InfrastructureError  (infrastructure.py)
        ├── PublishError
        │   └── PublishTimeoutError
        └── InvalidPayloadError
"""

from aircraft_events.kernel.errors.application import ApplicationError
from aircraft_events.kernel.errors.base import BaseError
from aircraft_events.kernel.errors.describe import MAX_ERROR_LENGTH, describe_error
from aircraft_events.kernel.errors.domain import (
    DomainError,
    NotFoundError,
    ValidationError,
)
from aircraft_events.kernel.errors.infrastructure import (
    InfrastructureError,
    InvalidPayloadError,
    PublishError,
    PublishTimeoutError,
)

__all__ = [
    "MAX_ERROR_LENGTH",
    "ApplicationError",
    "BaseError",
    "DomainError",
    "InfrastructureError",
    "InvalidPayloadError",
    "NotFoundError",
    "PublishError",
    "PublishTimeoutError",
    "ValidationError",
    "describe_error",
]
