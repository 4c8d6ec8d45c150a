"""Explicit store handle wrapping one SQLite connection."""

import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Any, AsyncIterator, Iterable

import aiosqlite

from ..errors import ConstraintViolation, StoreConnectionError

logger = logging.getLogger(__name__)


class CatalogStore:
    """Connection handle passed into every catalog operation.

    The store owns one connection in autocommit mode; ``transaction()``
    issues explicit BEGIN/COMMIT/ROLLBACK so a reconciliation run is a
    single atomic unit. Foreign keys are enforced on the connection.
    """

    def __init__(self, conn: aiosqlite.Connection, db_path: Path | None = None):
        self._conn = conn
        self.db_path = db_path
        self._closed = False
        self._in_transaction = False

    @classmethod
    async def open(cls, db_path: Path) -> "CatalogStore":
        """Open a connection to the database at ``db_path``."""
        try:
            conn = await aiosqlite.connect(db_path, isolation_level=None)
            conn.row_factory = aiosqlite.Row
            await conn.execute("PRAGMA foreign_keys = ON")
        except aiosqlite.Error as e:
            raise StoreConnectionError(f"Cannot open database: {e}", str(db_path)) from e
        return cls(conn, db_path)

    async def close(self) -> None:
        if not self._closed:
            self._closed = True
            await self._conn.close()

    async def __aenter__(self) -> "CatalogStore":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    @property
    def in_transaction(self) -> bool:
        return self._in_transaction

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator["CatalogStore"]:
        """Run the enclosed block in one transaction.

        Commits when the block completes and rolls back when it raises.
        Nested transactions are not supported.
        """
        if self._in_transaction:
            raise RuntimeError("Transaction already in progress")
        await self.execute("BEGIN")
        self._in_transaction = True
        try:
            yield self
            await self.execute("COMMIT")
        except BaseException:
            await self._rollback()
            raise
        finally:
            self._in_transaction = False
        logger.debug("Transaction committed")

    async def _rollback(self) -> None:
        if self._closed or not self._conn.in_transaction:
            # Nothing left to undo: the connection is gone or SQLite already
            # rolled the transaction back itself.
            return
        try:
            await self._conn.execute("ROLLBACK")
        except aiosqlite.Error as e:
            logger.warning("Rollback failed: %s", e)
            return
        logger.debug("Transaction rolled back")

    async def execute(
        self,
        sql: str,
        params: Iterable[Any] = (),
        entity_key: str | None = None,
    ) -> int:
        """Execute a statement and return the number of affected rows."""
        cursor = await self._run(sql, params, entity_key)
        rowcount = cursor.rowcount
        await cursor.close()
        return rowcount

    async def fetch_all(
        self, sql: str, params: Iterable[Any] = (), entity_key: str | None = None
    ) -> list[aiosqlite.Row]:
        cursor = await self._run(sql, params, entity_key)
        rows = await cursor.fetchall()
        await cursor.close()
        return list(rows)

    async def fetch_one(
        self, sql: str, params: Iterable[Any] = (), entity_key: str | None = None
    ) -> aiosqlite.Row | None:
        cursor = await self._run(sql, params, entity_key)
        row = await cursor.fetchone()
        await cursor.close()
        return row

    async def _run(
        self, sql: str, params: Iterable[Any], entity_key: str | None
    ) -> aiosqlite.Cursor:
        if self._closed:
            raise StoreConnectionError("Store connection is closed", entity_key)
        try:
            return await self._conn.execute(sql, tuple(params))
        except aiosqlite.IntegrityError as e:
            raise ConstraintViolation(f"Integrity error: {e}", entity_key) from e
        except aiosqlite.OperationalError as e:
            raise StoreConnectionError(f"Store error: {e}", entity_key) from e
