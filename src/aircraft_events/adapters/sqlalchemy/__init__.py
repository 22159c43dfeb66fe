"""SQLAlchemy adapter – delivery ledger, ORM model, session factory."""
from aircraft_events.adapters.sqlalchemy.ledger import SqlAlchemyDeliveryLedger
from aircraft_events.adapters.sqlalchemy.models import Base, DomainEventDeliveryModel, create_schema
from aircraft_events.adapters.sqlalchemy.session import SqlAlchemySessionFactory

__all__ = [
    "Base",
    "DomainEventDeliveryModel",
    "SqlAlchemyDeliveryLedger",
    "SqlAlchemySessionFactory",
    "create_schema",
]
