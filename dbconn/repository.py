"""
repository.py

create/list/delete over the connection list stored by ConfigFileStore.

every operation loads the whole list, mutates it in memory and writes the
whole list back. overlapping writers race (last write wins) unless the
repository is built with serialize_writes=True, which guards each
read-modify-write cycle with an asyncio.Lock. the lock only covers callers
sharing this instance in one process.
"""

from __future__ import annotations

import asyncio
import contextlib
import logging

from .config_store import ConfigFileStore
from .errors import ConnectionNotFoundError, InternalServiceError
from .mapper import from_config, new_id, to_config
from .models import Connection, ConnectionCreate


logger = logging.getLogger(__name__)


class ConnectionRepository:
    def __init__(self, store: ConfigFileStore, serialize_writes: bool = False):
        self.store = store
        self._lock = asyncio.Lock() if serialize_writes else None

    def _write_guard(self):
        return self._lock if self._lock is not None else contextlib.nullcontext()

    async def _load(self) -> list[Connection]:
        records = await asyncio.to_thread(self.store.read)
        return from_config(records)

    async def _save(self, connections: list[Connection]) -> None:
        await asyncio.to_thread(self.store.write, to_config(connections))

    async def create(self, options: ConnectionCreate | None) -> Connection:
        if not options:
            raise InternalServiceError("options is required")

        # caller supplied ids are never honored
        options.id = new_id()

        async with self._write_guard():
            connections = await self._load()

            conn = Connection(id=options.id, name=options.name, host=options.host, port=options.port)
            conn.add_database(
                id=new_id(),
                name=options.database_name,
                host=options.host,
                port=options.port,
                auth=options.auth,
            )

            connections.append(conn)
            await self._save(connections)

        logger.info("created connection %s (%s:%s)", conn.id, conn.host, conn.port)
        return conn

    async def list(self) -> list[Connection]:
        return await self._load()

    async def delete(self, connection_id: str) -> None:
        async with self._write_guard():
            connections = await self._load()

            found = next((c for c in connections if c.id == connection_id), None)
            if found is None:
                logger.warning("delete of unknown connection %s", connection_id)
                raise ConnectionNotFoundError(connection_id)

            connections.remove(found)
            await self._save(connections)

        logger.info("deleted connection %s", connection_id)
