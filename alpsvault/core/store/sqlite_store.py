"""
SQLite vault store implementation.

Each entity kind lives in its own table holding the full record as JSON plus
the indexed columns the repositories look up by.
"""

import asyncio
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Any

import aiosqlite

from alpsvault.core.store.base import RECORD_TYPES, EntityKind, Record, VaultStore
from alpsvault.models.anchor import Anchor
from alpsvault.utils.exceptions import StoreError
from alpsvault.utils.logger import get_logger

logger = get_logger(__name__)

# Indexed columns per table, in addition to id/created_at/updated_at/data
_INDEX_COLUMNS: dict[EntityKind, tuple[str, ...]] = {
    EntityKind.ARTIFACTS: ("type", "space_id"),
    EntityKind.ANCHORS: ("title",),
    EntityKind.SPACES: (),
}


class SQLiteVaultStore(VaultStore):
    """
    SQLite-based vault store.

    Features:
    - Fast local storage, single file on disk (or ":memory:")
    - WAL journal so readers see either before or after a transaction
    - Unique anchor titles enforced by the schema
    - Writes serialized per store: while one task holds a transaction, other
      tasks' writes wait for it to finish instead of joining it
    """

    def __init__(self, db_path: str = "data/alpsvault.db"):
        """
        Initialize SQLite vault store.

        Args:
            db_path: Path to SQLite database file
        """
        self.db_path = db_path
        self.connection: aiosqlite.Connection | None = None
        self._write_lock = asyncio.Lock()
        self._transaction_owner: asyncio.Task | None = None

        # Ensure directory exists
        if db_path != ":memory:":
            Path(db_path).parent.mkdir(parents=True, exist_ok=True)

    async def connect(self) -> None:
        """Establish connection to SQLite."""
        if self.connection is None:
            try:
                self.connection = await aiosqlite.connect(self.db_path)
                self.connection.row_factory = aiosqlite.Row
                await self.connection.execute("PRAGMA journal_mode = WAL")
                await self.connection.commit()
            except aiosqlite.Error as e:
                logger.error(f"Could not open vault database {self.db_path}: {e}")
                raise StoreError(
                    f"Could not open vault database: {e}", context={"db_path": self.db_path}
                ) from e

    async def initialize(self) -> None:
        """Initialize database schema."""
        await self.connect()

        async with self._write():
            await self._execute(
                """
                CREATE TABLE IF NOT EXISTS artifacts (
                    id TEXT PRIMARY KEY,
                    type TEXT NOT NULL,
                    space_id TEXT,
                    created_at REAL NOT NULL,
                    updated_at REAL NOT NULL,
                    data TEXT NOT NULL
                )
                """
            )
            await self._execute(
                """
                CREATE TABLE IF NOT EXISTS anchors (
                    id TEXT PRIMARY KEY,
                    title TEXT NOT NULL,
                    created_at REAL NOT NULL,
                    updated_at REAL NOT NULL,
                    data TEXT NOT NULL
                )
                """
            )
            await self._execute(
                """
                CREATE TABLE IF NOT EXISTS spaces (
                    id TEXT PRIMARY KEY,
                    created_at REAL NOT NULL,
                    updated_at REAL NOT NULL,
                    data TEXT NOT NULL
                )
                """
            )

            # Create indices
            await self._execute(
                "CREATE INDEX IF NOT EXISTS idx_artifacts_updated ON artifacts(updated_at)"
            )
            await self._execute(
                "CREATE INDEX IF NOT EXISTS idx_artifacts_space ON artifacts(space_id)"
            )
            await self._execute(
                "CREATE UNIQUE INDEX IF NOT EXISTS idx_anchors_title ON anchors(title)"
            )
            await self._execute(
                "CREATE INDEX IF NOT EXISTS idx_anchors_updated ON anchors(updated_at)"
            )
            await self._execute(
                "CREATE INDEX IF NOT EXISTS idx_spaces_updated ON spaces(updated_at)"
            )

        logger.debug(f"Vault schema ready at {self.db_path}")

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[None]:
        """
        All-or-nothing write group.

        Nested use by the owning task joins the outer transaction. Other tasks
        wait until it commits or rolls back.
        """
        await self.connect()

        if self._owns_transaction():
            yield
            return

        async with self._write_lock:
            await self._execute("BEGIN IMMEDIATE")
            self._transaction_owner = asyncio.current_task()
            try:
                yield
            except BaseException:
                self._transaction_owner = None
                await self.connection.rollback()
                raise
            self._transaction_owner = None
            await self._commit()

    # ═══════════════════════════════════════════════════════════
    # RECORD OPERATIONS
    # ═══════════════════════════════════════════════════════════

    async def put(self, kind: EntityKind, record: Record) -> None:
        """Insert or fully replace a record keyed by its id."""
        await self.connect()

        index_columns = _INDEX_COLUMNS[kind]
        columns = ("id", *index_columns, "created_at", "updated_at", "data")
        placeholders = ", ".join("?" * len(columns))
        assignments = ", ".join(f"{col} = excluded.{col}" for col in columns[1:])

        # Upsert on id only: a title collision with another anchor must fail,
        # not silently replace that anchor
        async with self._write():
            await self._execute(
                f"INSERT INTO {kind.value} ({', '.join(columns)}) VALUES ({placeholders}) "
                f"ON CONFLICT(id) DO UPDATE SET {assignments}",
                (
                    record.id,
                    *self._index_values(kind, record),
                    record.created_at.timestamp(),
                    record.updated_at.timestamp(),
                    record.model_dump_json(by_alias=True, exclude_none=True),
                ),
            )

    async def get(self, kind: EntityKind, record_id: str) -> Record | None:
        """Retrieve a record by id."""
        await self.connect()

        cursor = await self._execute(f"SELECT data FROM {kind.value} WHERE id = ?", (record_id,))
        row = await cursor.fetchone()

        if not row:
            return None

        return self._row_to_record(kind, row)

    async def delete(self, kind: EntityKind, record_id: str) -> None:
        """Delete a record by id."""
        await self.connect()

        async with self._write():
            await self._execute(f"DELETE FROM {kind.value} WHERE id = ?", (record_id,))

    async def clear(self, kind: EntityKind) -> None:
        """Remove every record of one kind."""
        await self.connect()

        async with self._write():
            await self._execute(f"DELETE FROM {kind.value}")

    async def list_all(self, kind: EntityKind) -> list[Record]:
        """All records of one kind, most recently updated first."""
        await self.connect()

        cursor = await self._execute(
            f"SELECT data FROM {kind.value} ORDER BY updated_at DESC, id DESC"
        )
        rows = await cursor.fetchall()

        return [self._row_to_record(kind, row) for row in rows]

    # ═══════════════════════════════════════════════════════════
    # SECONDARY INDEXES
    # ═══════════════════════════════════════════════════════════

    async def artifact_ids_for_space(self, space_id: str) -> list[str]:
        """IDs of artifacts explicitly assigned to a space."""
        await self.connect()

        cursor = await self._execute("SELECT id FROM artifacts WHERE space_id = ?", (space_id,))
        rows = await cursor.fetchall()

        return [row["id"] for row in rows]

    async def get_anchor_by_title(self, title: str) -> Anchor | None:
        """Anchor owning exactly ``title``."""
        await self.connect()

        cursor = await self._execute("SELECT data FROM anchors WHERE title = ?", (title,))
        row = await cursor.fetchone()

        if not row:
            return None

        return self._row_to_record(EntityKind.ANCHORS, row)

    async def count(self, kind: EntityKind) -> int:
        """Count records of one kind."""
        await self.connect()

        cursor = await self._execute(f"SELECT COUNT(*) FROM {kind.value}")
        row = await cursor.fetchone()

        return row[0] if row else 0

    async def close(self) -> None:
        """Close the connection."""
        if self.connection is not None:
            await self.connection.close()
            self.connection = None

    # ═══════════════════════════════════════════════════════════
    # HELPER METHODS
    # ═══════════════════════════════════════════════════════════

    async def _execute(self, sql: str, params: tuple[Any, ...] = ()) -> aiosqlite.Cursor:
        """Run one statement, translating driver errors into StoreError."""
        try:
            return await self.connection.execute(sql, params)
        except aiosqlite.Error as e:
            logger.error(f"SQLite statement failed: {e}")
            raise StoreError(
                f"Vault store operation failed: {e}",
                context={"error_type": type(e).__name__},
            ) from e

    def _owns_transaction(self) -> bool:
        return (
            self._transaction_owner is not None
            and self._transaction_owner is asyncio.current_task()
        )

    @asynccontextmanager
    async def _write(self) -> AsyncIterator[None]:
        """Standalone write committed on exit, or part of the caller's transaction."""
        if self._owns_transaction():
            yield
            return

        async with self._write_lock:
            try:
                yield
            except BaseException:
                await self.connection.rollback()
                raise
            await self._commit()

    async def _commit(self) -> None:
        try:
            await self.connection.commit()
        except aiosqlite.Error as e:
            logger.error(f"SQLite commit failed: {e}")
            raise StoreError(f"Vault store commit failed: {e}") from e

    def _index_values(self, kind: EntityKind, record: Record) -> tuple[Any, ...]:
        """Values for the kind's indexed columns."""
        if kind == EntityKind.ARTIFACTS:
            return (record.type.value, record.space_id)
        if kind == EntityKind.ANCHORS:
            return (record.title,)
        return ()

    def _row_to_record(self, kind: EntityKind, row: aiosqlite.Row) -> Record:
        """Convert database row to its pydantic record."""
        return RECORD_TYPES[kind].model_validate_json(row["data"])
