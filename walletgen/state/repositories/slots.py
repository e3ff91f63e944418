"""Named key-value slot repository."""
import aiosqlite
from datetime import datetime, timezone
from typing import Optional


class SlotRepository:
    """Reads and replaces opaque string blobs stored under a slot name.

    Writes commit immediately unless the caller opened a transaction with
    :meth:`begin_immediate`, in which case the caller commits.
    """

    def __init__(self, conn: aiosqlite.Connection) -> None:
        self._conn = conn

    async def begin_immediate(self) -> None:
        """Take the SQLite write lock for a read-modify-write cycle."""
        await self._conn.execute("BEGIN IMMEDIATE")

    async def get(self, name: str) -> Optional[str]:
        cursor = await self._conn.execute("SELECT value FROM kv_slots WHERE name = ?", (name,))
        row = await cursor.fetchone()
        return row["value"] if row is not None else None

    async def put(self, name: str, value: str, commit: bool = True) -> None:
        await self._conn.execute(
            "INSERT OR REPLACE INTO kv_slots (name, value, updated_at) VALUES (?, ?, ?)",
            (name, value, datetime.now(timezone.utc).isoformat()),
        )
        if commit:
            await self._conn.commit()

    async def delete(self, name: str, commit: bool = True) -> bool:
        """Remove a slot. Returns True if it existed."""
        cursor = await self._conn.execute("DELETE FROM kv_slots WHERE name = ?", (name,))
        if commit:
            await self._conn.commit()
        return cursor.rowcount > 0
