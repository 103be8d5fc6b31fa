"""Durable key/value backend — one text blob per key in the ``kv_store`` table."""

from typing import Optional, Protocol

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from echoday.models import KeyValueEntry, utcnow


class KeyValueBackend(Protocol):
    async def get(self, key: str) -> Optional[str]: ...

    async def set(self, key: str, value: str) -> None: ...


class SqlKeyValueBackend:
    """KeyValueBackend on top of the async SQLAlchemy session factory."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self._session_factory = session_factory

    async def get(self, key: str) -> Optional[str]:
        async with self._session_factory() as db:
            result = await db.execute(select(KeyValueEntry).where(KeyValueEntry.key == key))
            entry = result.scalar_one_or_none()
            return entry.value if entry else None

    async def set(self, key: str, value: str) -> None:
        async with self._session_factory() as db:
            result = await db.execute(select(KeyValueEntry).where(KeyValueEntry.key == key))
            entry = result.scalar_one_or_none()
            if entry:
                entry.value = value
                entry.updated_at = utcnow()
            else:
                db.add(KeyValueEntry(key=key, value=value))
            await db.commit()
