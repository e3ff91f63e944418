"""Input validation utilities for CLI commands."""

import re

from walletgen.wallet import ExportFormat, KeySelection


def validate_session_id(session_id: str) -> str:
    """Validate and return a history session ID. Raises ValueError if invalid."""
    if not session_id or not session_id.strip():
        raise ValueError("Session ID cannot be empty")
    session_id = session_id.strip()
    if not re.match(r"^[0-9]+$", session_id):
        raise ValueError("Session ID must be a numeric timestamp")
    return session_id


def validate_format(value: str) -> ExportFormat:
    """Validate and return an export format. Raises ValueError if invalid."""
    try:
        return ExportFormat(value.strip().lower())
    except ValueError as e:
        raise ValueError(f"Format must be one of: csv, json (got {value!r})") from e


def validate_selection(value: str) -> KeySelection:
    """Validate and return a key selection. Raises ValueError if invalid."""
    try:
        return KeySelection(value.strip().lower())
    except ValueError as e:
        raise ValueError(f"Selection must be one of: both, private, public (got {value!r})") from e


def validate_workers(workers: int) -> int:
    """Validate and return a worker count. Raises ValueError if invalid."""
    if workers < 1:
        raise ValueError("Workers must be at least 1")
    if workers > 64:
        raise ValueError("Workers cannot exceed 64")
    return workers
