"""Domain errors – rejected input and missing ledger rows."""

from __future__ import annotations

from typing import Any

from aircraft_events.kernel.errors.base import BaseError


class DomainError(BaseError):
    """The caller asked for something the domain does not allow."""

    default_code = "domain_error"


class ValidationError(DomainError):
    """An argument or value was rejected before any I/O happened.

    ``field`` names the offending argument when there is exactly one;
    ``errors`` holds field-level failures from schema validation.
    """

    default_code = "validation_error"

    def __init__(
        self,
        message: str,
        *,
        field: str | None = None,
        errors: list[dict[str, Any]] | None = None,
        **kwargs: Any,
    ) -> None:
        if field is not None:
            kwargs["detail"] = {"field": field, **(kwargs.get("detail") or {})}
        super().__init__(message, **kwargs)
        self.field = field
        self.errors: list[dict[str, Any]] = errors or []

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        if self.errors:
            base["errors"] = self.errors
        return base


class NotFoundError(DomainError):
    """No row exists for the given identifier, e.g. an unknown event id."""

    default_code = "not_found"

    def __init__(self, resource: str, identifier: Any = None, **kwargs: Any) -> None:
        if identifier is None:
            message = f"{resource} not found"
        else:
            message = f"{resource} '{identifier}' not found"
            kwargs.setdefault("detail", {"resource": resource, "identifier": str(identifier)})
        super().__init__(message, **kwargs)
        self.resource = resource
        self.identifier = identifier


__all__ = [
    "DomainError",
    "NotFoundError",
    "ValidationError",
]
