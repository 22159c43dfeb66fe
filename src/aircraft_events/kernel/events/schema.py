"""Validation schema for domain events read back from storage.

Payloads written by older producers use camelCase keys
(``occurredAt``, ``actorId``); both spellings are accepted.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError, field_validator

from aircraft_events.kernel.errors import InvalidPayloadError
from aircraft_events.kernel.events.domain_event import (
    ActorRole,
    DomainEvent,
    DomainEventType,
    EventMeta,
)


class EventMetaSchema(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    actor_id: str = Field(min_length=1, validation_alias=AliasChoices("actor_id", "actorId"))
    actor_email: str = Field(min_length=1, validation_alias=AliasChoices("actor_email", "actorEmail"))
    actor_role: ActorRole = Field(validation_alias=AliasChoices("actor_role", "actorRole"))


class StoredEventSchema(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)

    id: str = Field(min_length=1)
    type: DomainEventType
    source: str = Field(min_length=1)
    version: int = Field(gt=0)
    occurred_at: datetime = Field(validation_alias=AliasChoices("occurred_at", "occurredAt"))
    detail: Any = None
    meta: EventMetaSchema

    @field_validator("occurred_at")
    @classmethod
    def _assume_utc(cls, value: datetime) -> datetime:
        if value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        return value

    def to_event(self, event_id: str | None = None) -> DomainEvent:
        return DomainEvent(
            id=event_id or self.id,
            type=self.type,
            source=self.source,
            version=self.version,
            occurred_at=self.occurred_at,
            detail=self.detail if isinstance(self.detail, dict) else {},
            meta=EventMeta(
                actor_id=self.meta.actor_id,
                actor_email=self.meta.actor_email,
                actor_role=self.meta.actor_role,
            ),
        )


def parse_stored_event(payload: Any, *, event_id: str | None = None) -> DomainEvent:
    """Validate *payload* (a mapping or a JSON document) into a DomainEvent."""
    try:
        if isinstance(payload, (str, bytes, bytearray)):
            schema = StoredEventSchema.model_validate_json(payload)
        else:
            schema = StoredEventSchema.model_validate(payload)
    except ValidationError as exc:
        errors = exc.errors(include_url=False, include_context=False, include_input=False)
        raise InvalidPayloadError(
            f"Stored event payload failed validation ({exc.error_count()} errors)",
            errors=[dict(e) for e in errors],
            cause=exc,
        ) from exc
    return schema.to_event(event_id)


__all__ = ["EventMetaSchema", "StoredEventSchema", "parse_stored_event"]
