"""Batch Solana wallet generation with bounded local history."""

from .state import Session, SessionHistoryStore, StorageCorruptError, save_batch
from .wallet import (
    Batch,
    DecodingError,
    ExportFormat,
    InvalidCountError,
    KeyPair,
    KeySelection,
    RandomSourceError,
    WalletError,
    coerce_count,
    decode,
    encode_public,
    encode_secret,
    generate_batch,
    generate_keypair,
    render_export,
)

__all__ = [
    "generate_batch", "render_export", "SessionHistoryStore", "save_batch",
    "generate_keypair", "encode_secret", "encode_public", "decode", "coerce_count",
    "KeyPair", "Batch", "Session", "ExportFormat", "KeySelection",
    "WalletError", "InvalidCountError", "DecodingError", "RandomSourceError", "StorageCorruptError",
]

__version__ = "0.1.0"
