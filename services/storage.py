"""
services/storage.py
────────────────────────────────────────────────────────────────────────
String-keyed key/value stores. Values are opaque strings (JSON produced
by services.repositories); stores never interpret them.

* MemoryKeyValueStore – dict, for tests and STORAGE_BACKEND=memory
* SqlKeyValueStore    – one row per key in `kv_entries`
"""
from __future__ import annotations

import logging
from typing import Dict, Protocol

from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker

from config import settings
from services.db import KeyValueEntry, engine, init_models

_LOG = logging.getLogger(__name__)


class KeyValueStore(Protocol):
    async def get(self, key: str) -> str | None: ...

    async def set(self, key: str, value: str) -> None: ...

    async def remove(self, key: str) -> None: ...


class MemoryKeyValueStore:
    def __init__(self) -> None:
        self._data: Dict[str, str] = {}

    async def get(self, key: str) -> str | None:
        return self._data.get(key)

    async def set(self, key: str, value: str) -> None:
        self._data[key] = value

    async def remove(self, key: str) -> None:
        self._data.pop(key, None)

    def keys(self) -> list[str]:
        return sorted(self._data)


class SqlKeyValueStore:
    def __init__(self, eng: AsyncEngine) -> None:
        self._engine = eng
        self._sessions = async_sessionmaker(eng, expire_on_commit=False)
        self._ready = False

    async def _ensure_schema(self) -> None:
        if not self._ready:
            await init_models(self._engine)
            self._ready = True

    async def get(self, key: str) -> str | None:
        await self._ensure_schema()
        async with self._sessions() as db:
            row = await db.get(KeyValueEntry, key)
            return row.value if row is not None else None

    async def set(self, key: str, value: str) -> None:
        await self._ensure_schema()
        async with self._sessions() as db:
            row = await db.get(KeyValueEntry, key)
            if row is None:
                db.add(KeyValueEntry(key=key, value=value))
            else:
                row.value = value
            await db.commit()
        _LOG.debug("stored %s (%d bytes)", key, len(value))

    async def remove(self, key: str) -> None:
        await self._ensure_schema()
        async with self._sessions() as db:
            row = await db.get(KeyValueEntry, key)
            if row is not None:
                await db.delete(row)
                await db.commit()


async def build_store(backend: str | None = None) -> KeyValueStore:
    backend = backend or settings.storage_backend
    if backend == "memory":
        _LOG.warning("using in-memory storage – nothing survives a restart")
        return MemoryKeyValueStore()
    return SqlKeyValueStore(await engine())
