"""Infrastructure errors – event delivery and stored payload failures."""

from __future__ import annotations

from typing import Any

from aircraft_events.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    """Infrastructure / I/O failure that is not a business rule violation."""

    default_code = "infrastructure_error"


class PublishError(InfrastructureError):
    """The publisher could not confirm delivery of one or more events.

    ``error_code`` carries the channel's own error code when the channel
    rejected an entry (e.g. an EventBridge ``ErrorCode``).
    """

    default_code = "publish_error"

    def __init__(
        self,
        message: str,
        *,
        error_code: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.error_code = error_code


class PublishTimeoutError(PublishError):
    """A publish call exceeded its deadline."""

    default_code = "publish_timeout"


class InvalidPayloadError(InfrastructureError):
    """A stored payload could not be turned back into a domain event."""

    default_code = "invalid_payload"

    def __init__(
        self,
        message: str,
        *,
        errors: list[dict[str, Any]] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.errors: list[dict[str, Any]] = errors or []

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        base["errors"] = self.errors
        return base


__all__ = [
    "InfrastructureError",
    "InvalidPayloadError",
    "PublishError",
    "PublishTimeoutError",
]
