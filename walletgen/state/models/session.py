"""History session model."""
import threading
import time
from dataclasses import dataclass
from datetime import datetime, timezone

from walletgen.wallet.models import Batch


@dataclass(frozen=True)
class Session:
    """A saved generation batch.

    Attributes:
        id: Decimal millisecond timestamp, unique within the process.
        timestamp: Creation time in milliseconds since the epoch.
        batch: The generated batch, embedded by value.
    """

    id: str
    timestamp: int
    batch: Batch

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("id cannot be empty")
        if self.timestamp < 0:
            raise ValueError("timestamp cannot be negative")

    @property
    def created_at(self) -> datetime:
        return datetime.fromtimestamp(self.timestamp / 1000, tz=timezone.utc)

    @classmethod
    def create(cls, batch: Batch) -> "Session":
        """Wrap a batch in a new session stamped with the current time."""
        timestamp, session_id = _ids.next()
        return cls(id=session_id, timestamp=timestamp, batch=batch)


class _SessionIdFactory:
    """Issues strictly increasing millisecond ids."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._last = 0

    def next(self) -> tuple[int, str]:
        now_ms = int(time.time() * 1000)
        with self._lock:
            self._last = max(now_ms, self._last + 1)
            return now_ms, str(self._last)


_ids = _SessionIdFactory()
