"""CLI utilities."""

from .config import ConfigError, ConfigManager, Preferences
from .validation import validate_format, validate_selection, validate_session_id, validate_workers

__all__ = [
    "ConfigManager",
    "ConfigError",
    "Preferences",
    "validate_format",
    "validate_selection",
    "validate_session_id",
    "validate_workers",
]
