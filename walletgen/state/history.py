"""Bounded generation history persisted in a single key-value slot.

The whole history is one JSON array stored under the ``wallet-sessions``
slot, newest session first. Each mutation reads, modifies and rewrites the
array inside one ``BEGIN IMMEDIATE`` transaction, and mutations from the same
store are additionally serialized by an ``asyncio.Lock``.
"""
import asyncio
import json
import logging
from typing import Any, Optional

from walletgen.state.database import DatabaseManager
from walletgen.state.models.session import Session
from walletgen.state.repositories.slots import SlotRepository
from walletgen.wallet.crypto import decode, encode_public, encode_secret
from walletgen.wallet.exceptions import DecodingError
from walletgen.wallet.models import Batch, KeyPair

logger = logging.getLogger(__name__)

HISTORY_SLOT = "wallet-sessions"
MAX_SESSIONS = 50


class StorageCorruptError(Exception):
    """The stored history blob could not be parsed."""


def session_to_dict(session: Session) -> dict[str, Any]:
    batch = session.batch
    return {
        "id": session.id,
        "timestamp": session.timestamp,
        "includePublicKey": batch.include_public_key,
        "generationTimeMs": batch.generation_time_ms,
        "keyPairs": [
            {"secretKey": encode_secret(p.secret_key), "publicKey": encode_public(p.public_key)}
            for p in batch.key_pairs
        ],
    }


def session_from_dict(data: dict[str, Any]) -> Session:
    """Rebuild a Session from its stored form. Raises StorageCorruptError."""
    try:
        pairs = tuple(
            KeyPair(secret_key=decode(p["secretKey"]), public_key=decode(p["publicKey"]))
            for p in data["keyPairs"]
        )
        batch = Batch(
            key_pairs=pairs,
            include_public_key=bool(data["includePublicKey"]),
            generation_time_ms=float(data["generationTimeMs"]),
        )
        return Session(id=str(data["id"]), timestamp=int(data["timestamp"]), batch=batch)
    except (KeyError, TypeError, ValueError, DecodingError) as e:
        raise StorageCorruptError(f"Invalid session entry: {e}") from e


def parse_history(raw: Optional[str]) -> list[Session]:
    """Parse a stored history blob. ``None`` yields an empty history."""
    if raw is None:
        return []
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise StorageCorruptError(f"History is not valid JSON: {e}") from e
    if not isinstance(data, list):
        raise StorageCorruptError("History must be a JSON array")
    return [session_from_dict(item) for item in data]


def dump_history(sessions: list[Session]) -> str:
    return json.dumps([session_to_dict(s) for s in sessions])


class SessionHistoryStore:
    """Newest-first log of saved batches, capped at ``max_sessions`` entries.

    Unreadable stored state is treated as an empty history so a corrupted
    database never blocks wallet generation.
    """

    def __init__(
        self,
        db: DatabaseManager,
        slot: str = HISTORY_SLOT,
        max_sessions: int = MAX_SESSIONS,
    ) -> None:
        if max_sessions < 1:
            raise ValueError("max_sessions must be at least 1")
        self._db = db
        self._slot = slot
        self._max_sessions = max_sessions
        self._lock = asyncio.Lock()

    @property
    def max_sessions(self) -> int:
        return self._max_sessions

    async def _ensure_initialized(self) -> None:
        if not self._db.is_initialized:
            await self._db.initialize()

    def _load(self, raw: Optional[str]) -> list[Session]:
        try:
            return parse_history(raw)
        except StorageCorruptError as e:
            logger.warning("Discarding unreadable history in slot %r: %s", self._slot, e)
            return []

    async def list_sessions(self) -> list[Session]:
        """Return saved sessions, newest first."""
        await self._ensure_initialized()
        async with self._db.connection() as conn:
            raw = await SlotRepository(conn).get(self._slot)
        return self._load(raw)

    async def get(self, session_id: str) -> Optional[Session]:
        """Look up a session by id."""
        for session in await self.list_sessions():
            if session.id == session_id:
                return session
        return None

    async def insert(self, session: Session) -> None:
        """Prepend a session, dropping the oldest entries beyond the cap."""
        def prepend(sessions: list[Session]) -> list[Session]:
            return [session, *sessions][: self._max_sessions]

        before, after = await self._mutate(prepend)
        evicted = len(before) + 1 - len(after)
        logger.info("Saved session=%s (%d key pairs), history size=%d", session.id, session.batch.count, len(after))
        if evicted > 0:
            logger.info("Evicted %d oldest session(s) from history", evicted)

    async def delete_one(self, session_id: str) -> bool:
        """Remove a session by id. Returns True if one was removed."""
        before, after = await self._mutate(lambda sessions: [s for s in sessions if s.id != session_id])
        deleted = len(after) < len(before)
        if deleted:
            logger.info("Deleted session=%s", session_id)
        return deleted

    async def delete_all(self) -> None:
        """Clear the stored history."""
        await self._ensure_initialized()
        async with self._lock:
            async with self._db.connection() as conn:
                await SlotRepository(conn).delete(self._slot)
        logger.info("Cleared session history")

    async def _mutate(self, change) -> tuple[list[Session], list[Session]]:
        """Apply *change* to the stored list inside one write transaction."""
        await self._ensure_initialized()
        async with self._lock:
            async with self._db.connection() as conn:
                repo = SlotRepository(conn)
                await repo.begin_immediate()
                try:
                    before = self._load(await repo.get(self._slot))
                    after = change(before)
                    await repo.put(self._slot, dump_history(after), commit=False)
                    await conn.commit()
                except BaseException:
                    await conn.rollback()
                    raise
        return before, after


async def save_batch(store: SessionHistoryStore, batch: Batch) -> Session:
    """Wrap a batch in a new session and insert it into the store."""
    session = Session.create(batch)
    await store.insert(session)
    return session
