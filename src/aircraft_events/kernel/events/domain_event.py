"""Domain events and their actor attribution."""

from __future__ import annotations

import copy
import dataclasses
from collections.abc import Mapping
from datetime import UTC, datetime
from enum import Enum
from types import MappingProxyType
from typing import Any
from uuid import uuid4

from pydantic_core import PydanticSerializationError, to_jsonable_python

from aircraft_events.kernel.errors import ValidationError


class DomainEventType(str, Enum):
    AIRCRAFT_STATUS_CHANGED = "aircraft.status.changed"
    CERTIFICATION_MILESTONE_UPDATED = "certification.milestone.updated"


class ActorRole(str, Enum):
    INTERNAL = "internal"
    CUSTOMER = "customer"


@dataclasses.dataclass(frozen=True)
class EventMeta:
    """Who caused the fact."""

    actor_id: str
    actor_email: str
    actor_role: ActorRole

    def to_dict(self) -> dict[str, str]:
        return {
            "actor_id": self.actor_id,
            "actor_email": self.actor_email,
            "actor_role": self.actor_role.value,
        }


@dataclasses.dataclass(frozen=True, eq=False)
class DomainEvent:
    """An immutable fact describing a business-state change.

    ``id`` is the deduplication key for delivery. ``detail`` is opaque to the
    delivery pipeline. At construction it is copied into JSON-safe form
    (dates and datetimes become ISO strings, ``Decimal`` and ``UUID`` become
    strings) and exposed as a read-only mapping, so the payload stored in
    the ledger is exactly what the event holds. Values with no JSON form
    raise :class:`~aircraft_events.kernel.errors.ValidationError`.

    Example::

        event = DomainEvent(
            type=DomainEventType.AIRCRAFT_STATUS_CHANGED,
            source="aircraft-dashboard.backend",
            detail={"aircraftId": "a-1", "newPhase": "Certification"},
            meta=EventMeta("u-1", "ops@example.com", ActorRole.INTERNAL),
        )
    """

    type: DomainEventType
    source: str
    detail: Mapping[str, Any]
    meta: EventMeta
    id: str = dataclasses.field(default_factory=lambda: str(uuid4()))
    version: int = 1
    occurred_at: datetime = dataclasses.field(default_factory=lambda: datetime.now(UTC))

    def __post_init__(self) -> None:
        object.__setattr__(self, "detail", MappingProxyType(_json_safe(self.detail)))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DomainEvent):
            return NotImplemented
        return self.to_payload() == other.to_payload()

    def __hash__(self) -> int:
        return hash(self.id)

    @property
    def event_type(self) -> str:
        return self.type.value

    def to_payload(self) -> dict[str, Any]:
        """Return the JSON-safe form stored in the delivery ledger."""
        return {
            "id": self.id,
            "type": self.type.value,
            "source": self.source,
            "version": self.version,
            "occurred_at": self.occurred_at.isoformat(),
            "detail": copy.deepcopy(dict(self.detail)),
            "meta": self.meta.to_dict(),
        }

    @classmethod
    def from_payload(cls, payload: Any, *, event_id: str | None = None) -> "DomainEvent":
        """Rebuild an event from a stored payload.

        Raises :class:`~aircraft_events.kernel.errors.InvalidPayloadError`
        when the payload does not match the event schema. When *event_id* is
        given it takes precedence over the id found in the payload.
        """
        from aircraft_events.kernel.events.schema import parse_stored_event

        return parse_stored_event(payload, event_id=event_id)


def _json_safe(detail: Mapping[str, Any]) -> dict[str, Any]:
    try:
        return to_jsonable_python(dict(detail))
    except PydanticSerializationError as exc:
        raise ValidationError(
            f"Event detail is not JSON-serialisable: {exc}", field="detail", cause=exc
        ) from exc


def create_domain_event(
    type: DomainEventType,
    source: str,
    detail: Mapping[str, Any],
    meta: EventMeta,
) -> DomainEvent:
    """Build a version-1 event with a fresh id and the current time."""
    return DomainEvent(type=type, source=source, detail=detail, meta=meta)


__all__ = [
    "ActorRole",
    "DomainEvent",
    "DomainEventType",
    "EventMeta",
    "create_domain_event",
]
