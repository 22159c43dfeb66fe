"""Kernel events – domain event model, aircraft details, stored-payload schema."""
from aircraft_events.kernel.events.aircraft import (
    AircraftPhase,
    AircraftStatusChangedDetail,
    CertificationMilestoneUpdatedDetail,
    aircraft_status_changed,
    certification_milestone_updated,
)
from aircraft_events.kernel.events.domain_event import (
    ActorRole,
    DomainEvent,
    DomainEventType,
    EventMeta,
    create_domain_event,
)
from aircraft_events.kernel.events.schema import StoredEventSchema, parse_stored_event

__all__ = [
    "ActorRole",
    "AircraftPhase",
    "AircraftStatusChangedDetail",
    "CertificationMilestoneUpdatedDetail",
    "DomainEvent",
    "DomainEventType",
    "EventMeta",
    "StoredEventSchema",
    "aircraft_status_changed",
    "certification_milestone_updated",
    "create_domain_event",
    "parse_stored_event",
]
