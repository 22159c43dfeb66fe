"""SQLAlchemy ORM model for the delivery ledger."""
from __future__ import annotations

import datetime
from typing import Any

from sqlalchemy import JSON, Boolean, DateTime, Index, Integer, String, Text, false
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    pass


class DomainEventDeliveryModel(Base):
    """One row per domain event; ``event_id`` is the dedup key.

    The composite index serves the pending scan
    (``published = false AND attempts < n ORDER BY created_at``).
    """

    __tablename__ = "domain_event_deliveries"
    __table_args__ = (
        Index("ix_domain_event_deliveries_pending", "published", "attempts", "created_at"),
    )

    event_id: Mapped[str] = mapped_column(String(64), primary_key=True)
    event_type: Mapped[str] = mapped_column(String(128), nullable=False)
    source: Mapped[str] = mapped_column(String(256), nullable=False)
    attempts: Mapped[int] = mapped_column(Integer, nullable=False, default=0, server_default="0")
    published: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False, server_default=false())
    payload: Mapped[dict[str, Any]] = mapped_column(JSON().with_variant(JSONB(), "postgresql"), nullable=False)
    last_error: Mapped[str | None] = mapped_column(Text, nullable=True, default=None)
    created_at: Mapped[datetime.datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    published_at: Mapped[datetime.datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True, default=None
    )


async def create_schema(bind: Any) -> None:
    """Create the ledger table if it does not exist.

    Parameters
    ----------
    bind:
        An :class:`~sqlalchemy.ext.asyncio.AsyncEngine`.
    """
    async with bind.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


__all__ = ["Base", "DomainEventDeliveryModel", "create_schema"]
