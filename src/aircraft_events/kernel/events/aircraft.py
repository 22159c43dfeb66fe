"""Aircraft lifecycle event details and factories.

Detail keys are camelCase because they are forwarded verbatim to external
consumers of the event bus.
"""

from __future__ import annotations

import dataclasses
from enum import Enum
from typing import Any

from aircraft_events.kernel.events.domain_event import (
    DomainEvent,
    DomainEventType,
    EventMeta,
    create_domain_event,
)


class AircraftPhase(str, Enum):
    MANUFACTURING = "Manufacturing"
    GROUND_TESTING = "Ground Testing"
    FLIGHT_TESTING = "Flight Testing"
    CERTIFICATION = "Certification"
    READY = "Ready for Delivery"
    DELIVERED = "Delivered"


@dataclasses.dataclass(frozen=True)
class AircraftStatusChangedDetail:
    aircraft_id: str
    tail_number: str
    previous_phase: AircraftPhase
    new_phase: AircraftPhase
    previous_estimated_delivery_date: str | None = None
    new_estimated_delivery_date: str | None = None

    def to_detail(self) -> dict[str, Any]:
        detail: dict[str, Any] = {
            "aircraftId": self.aircraft_id,
            "tailNumber": self.tail_number,
            "previousPhase": self.previous_phase.value,
            "newPhase": self.new_phase.value,
        }
        if self.previous_estimated_delivery_date is not None:
            detail["previousEstimatedDeliveryDate"] = self.previous_estimated_delivery_date
        if self.new_estimated_delivery_date is not None:
            detail["newEstimatedDeliveryDate"] = self.new_estimated_delivery_date
        return detail


@dataclasses.dataclass(frozen=True)
class CertificationMilestoneUpdatedDetail:
    aircraft_id: str
    tail_number: str
    milestone_id: str
    milestone_name: str
    previous_completed: bool
    new_completed: bool
    previous_certification_progress: int
    new_certification_progress: int

    def to_detail(self) -> dict[str, Any]:
        return {
            "aircraftId": self.aircraft_id,
            "tailNumber": self.tail_number,
            "milestoneId": self.milestone_id,
            "milestoneName": self.milestone_name,
            "previousCompleted": self.previous_completed,
            "newCompleted": self.new_completed,
            "previousCertificationProgress": self.previous_certification_progress,
            "newCertificationProgress": self.new_certification_progress,
        }


def aircraft_status_changed(
    source: str, detail: AircraftStatusChangedDetail, meta: EventMeta
) -> DomainEvent:
    return create_domain_event(
        DomainEventType.AIRCRAFT_STATUS_CHANGED, source, detail.to_detail(), meta
    )


def certification_milestone_updated(
    source: str, detail: CertificationMilestoneUpdatedDetail, meta: EventMeta
) -> DomainEvent:
    return create_domain_event(
        DomainEventType.CERTIFICATION_MILESTONE_UPDATED, source, detail.to_detail(), meta
    )


__all__ = [
    "AircraftPhase",
    "AircraftStatusChangedDetail",
    "CertificationMilestoneUpdatedDetail",
    "aircraft_status_changed",
    "certification_milestone_updated",
]
