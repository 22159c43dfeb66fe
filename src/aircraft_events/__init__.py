"""
aircraft_events – domain-event outbox and at-least-once delivery.

Import path convention::

    from aircraft_events.kernel.events import DomainEvent, create_domain_event
    from aircraft_events.application.outbox import PublishCoordinator, ReplayJob
    from aircraft_events.adapters.sqlalchemy import SqlAlchemyDeliveryLedger
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
