"""State management module."""
from walletgen.state.database import DatabaseManager, DatabaseError
from walletgen.state.history import HISTORY_SLOT, MAX_SESSIONS, SessionHistoryStore, StorageCorruptError, save_batch
from walletgen.state.models import Session
from walletgen.state.repositories import SlotRepository
__all__ = ["DatabaseManager", "DatabaseError",
           "HISTORY_SLOT", "MAX_SESSIONS", "SessionHistoryStore", "StorageCorruptError", "save_batch",
           "Session", "SlotRepository"]
