"""SQLAlchemy adapter – SqlAlchemySessionFactory."""
from __future__ import annotations

from typing import Any

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine


class SqlAlchemySessionFactory:
    """Owns one async engine for a ``DATABASE_URL`` and hands out sessions.

    Calling the factory returns a new :class:`AsyncSession`, which is what
    :class:`~aircraft_events.adapters.sqlalchemy.SqlAlchemyDeliveryLedger`
    expects. Used as an async context manager, the engine is disposed on
    exit::

        async with SqlAlchemySessionFactory(settings.database_url) as sessions:
            ledger = SqlAlchemyDeliveryLedger(sessions)
    """

    def __init__(self, database_url: str, **engine_kwargs: Any) -> None:
        self._engine = create_async_engine(database_url, **engine_kwargs)
        self._sessions = async_sessionmaker(self._engine, class_=AsyncSession, expire_on_commit=False)

    @property
    def engine(self) -> AsyncEngine:
        return self._engine

    def __call__(self) -> AsyncSession:
        return self._sessions()

    async def __aenter__(self) -> "SqlAlchemySessionFactory":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.dispose()

    async def dispose(self) -> None:
        await self._engine.dispose()


__all__ = ["SqlAlchemySessionFactory"]
