"""CLI commands."""

from . import (
    generate,
    history,
    init,
    inspect_key,
    status,
)

__all__ = [
    "generate",
    "history",
    "init",
    "inspect_key",
    "status",
]
