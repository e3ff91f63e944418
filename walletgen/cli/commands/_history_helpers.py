"""Shared helpers for commands that touch the history database."""

from walletgen.cli.utils import ConfigManager
from walletgen.state import DatabaseManager, SessionHistoryStore, Session


def open_history(config: ConfigManager) -> SessionHistoryStore:
    """Build a history store over the configured database."""
    return SessionHistoryStore(DatabaseManager(config.db_path))


def session_summary(session: Session) -> dict:
    """Describe a session without exposing any key material."""
    return {
        "id": session.id,
        "timestamp": session.timestamp,
        "created_at": session.created_at.isoformat(),
        "count": session.batch.count,
        "include_public_key": session.batch.include_public_key,
        "generation_time_ms": round(session.batch.generation_time_ms, 2),
    }
