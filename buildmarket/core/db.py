"""
Async database access helpers (raw SQL) using asyncpg.

`Database` owns the connection pool. It is constructed explicitly, opened on
application startup and closed on shutdown (see `buildmarket/main.py`), then
passed down to every repository function.

SQL parameter style:
- asyncpg uses positional placeholders: $1, $2, $3, ...
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

import asyncpg

from . import settings

logger = logging.getLogger(__name__)


def _record_to_dict(record: asyncpg.Record) -> dict[str, Any]:
    return dict(record)


class Executor:
    """
    Query methods shared by the pool-backed handle and a transaction.

    Subclasses supply `_target()`: anything with asyncpg's
    `fetchrow`/`fetch`/`execute` (a Pool or a Connection).
    """

    def _target(self) -> Any:
        raise NotImplementedError

    async def fetch_one(self, sql: str, *args: Any) -> dict[str, Any] | None:
        """
        Run a query and return a single row as a dict (or None).
        """
        row = await self._target().fetchrow(sql, *args)
        return _record_to_dict(row) if row is not None else None

    async def fetch_all(self, sql: str, *args: Any) -> list[dict[str, Any]]:
        """
        Run a query and return all rows as a list of dicts.
        """
        rows = await self._target().fetch(sql, *args)
        return [_record_to_dict(r) for r in rows]

    async def execute(self, sql: str, *args: Any) -> str:
        """
        Run a statement (INSERT/UPDATE/DELETE/DDL). Returns the status tag.
        """
        return await self._target().execute(sql, *args)


class Transaction(Executor):
    def __init__(self, conn: asyncpg.Connection) -> None:
        self._conn = conn

    def _target(self) -> asyncpg.Connection:
        return self._conn

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[Transaction]:
        # Nested use becomes a savepoint.
        async with self._conn.transaction():
            yield self


class Database(Executor):
    def __init__(
        self,
        dsn: str | None = None,
        *,
        min_size: int | None = None,
        max_size: int | None = None,
        command_timeout: int | None = None,
    ) -> None:
        self._dsn = dsn
        self._min_size = min_size
        self._max_size = max_size
        self._command_timeout = command_timeout
        self._pool: asyncpg.Pool | None = None

    async def connect(self) -> None:
        if self._pool is not None:
            return None
        self._pool = await asyncpg.create_pool(
            dsn=self._dsn or settings.database_url(),
            min_size=self._min_size or settings.pool_min_size(),
            max_size=self._max_size or settings.pool_max_size(),
            command_timeout=self._command_timeout or settings.command_timeout(),
        )
        logger.info("db_pool_opened")

    async def close(self) -> None:
        if self._pool is None:
            return None
        await self._pool.close()
        self._pool = None
        logger.info("db_pool_closed")

    def pool(self) -> asyncpg.Pool:
        if self._pool is None:
            raise RuntimeError("DB pool is not initialized. Call connect() on startup.")
        return self._pool

    def _target(self) -> asyncpg.Pool:
        return self.pool()

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[Transaction]:
        """
        Acquire one connection and run everything inside a single transaction.
        """
        async with self.pool().acquire() as conn:  # type: asyncpg.Connection
            async with conn.transaction():
                yield Transaction(conn)
