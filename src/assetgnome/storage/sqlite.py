"""SQLite-backed storage for user actions and item metadata.

Each call opens its own connection inside ``asyncio.to_thread`` and closes it
before returning, so concurrent calls never share a connection. Records are
stored as JSON blobs produced by the pydantic models.
"""

import asyncio
import sqlite3
from pathlib import Path
from typing import Callable, Optional, TypeVar

from assetgnome.models.actions import UserActionRecord
from assetgnome.models.core import MediaItemRef
from assetgnome.storage.base import ActionStorage, ItemStorage

CREATE_ACTIONS_SQL = """
    CREATE TABLE IF NOT EXISTS user_actions (
        id TEXT NOT NULL PRIMARY KEY,
        server_id TEXT NOT NULL,
        json_blob TEXT NOT NULL
    );
    """

CREATE_ITEMS_SQL = """
    CREATE TABLE IF NOT EXISTS items (
        id TEXT NOT NULL PRIMARY KEY,
        json_blob TEXT NOT NULL
    );
    """

T = TypeVar("T")


class _SqliteStore:
    """Shared connection handling for the SQLite stores."""

    create_table_sql: str = ""

    def __init__(self, db_path: Path) -> None:
        self.db_path = Path(db_path).expanduser()

    async def _run(self, logic: Callable[[sqlite3.Connection], T]) -> T:
        def run() -> T:
            self.db_path.parent.mkdir(parents=True, exist_ok=True)
            conn = sqlite3.connect(self.db_path)
            try:
                conn.execute(self.create_table_sql)
                result = logic(conn)
                conn.commit()
                return result
            finally:
                conn.close()

        return await asyncio.to_thread(run)


class SqliteActionStorage(_SqliteStore, ActionStorage):
    """ActionStorage persisting records in a SQLite table."""

    create_table_sql = CREATE_ACTIONS_SQL

    async def create(self, record: UserActionRecord) -> None:
        """Insert *record*. The record must already carry an id.

        Raises:
            ValueError: If the record has no id.
            sqlite3.IntegrityError: If a record with the same id exists.
        """
        if not record.id:
            raise ValueError("User action must have an id before it is stored")

        def insert(conn: sqlite3.Connection) -> None:
            conn.execute(
                "INSERT INTO user_actions (id, server_id, json_blob) VALUES (?, ?, ?)",
                (record.id, record.server_id, record.model_dump_json()),
            )

        await self._run(insert)

    async def delete(self, record: UserActionRecord) -> None:
        """Delete the stored record with *record*'s id, if any."""

        def remove(conn: sqlite3.Connection) -> None:
            conn.execute("DELETE FROM user_actions WHERE id=?", (record.id,))

        await self._run(remove)

    async def get(self, server_id: str) -> list[UserActionRecord]:
        """Return the records for *server_id* in insertion order."""

        def select(conn: sqlite3.Connection) -> list[str]:
            rows = conn.execute(
                "SELECT json_blob FROM user_actions WHERE server_id=? ORDER BY rowid",
                (server_id,),
            ).fetchall()
            return [row[0] for row in rows]

        blobs = await self._run(select)
        return [UserActionRecord.model_validate_json(blob) for blob in blobs]


class SqliteItemStorage(_SqliteStore, ItemStorage):
    """ItemStorage persisting item metadata in a SQLite table."""

    create_table_sql = CREATE_ITEMS_SQL

    async def add_or_update(self, item: MediaItemRef) -> None:
        """Insert *item* or replace the stored copy with the same id."""

        def upsert(conn: sqlite3.Connection) -> None:
            conn.execute(
                "REPLACE INTO items (id, json_blob) VALUES (?, ?)",
                (item.id, item.model_dump_json()),
            )

        await self._run(upsert)

    async def get(self, item_id: str) -> Optional[MediaItemRef]:
        """Return the stored item with *item_id*, or None."""

        def select(conn: sqlite3.Connection) -> Optional[str]:
            row = conn.execute(
                "SELECT json_blob FROM items WHERE id=?", (item_id,)
            ).fetchone()
            return row[0] if row else None

        blob = await self._run(select)
        if blob is None:
            return None
        return MediaItemRef.model_validate_json(blob)
