"""Solana key pair generation, encoding and export."""

from .batch import DEFAULT_WALLET_COUNT, coerce_count, generate_batch, validate_count
from .crypto import decode, decode_public, encode_public, encode_secret, generate_keypair, keypair_from_secret
from .exceptions import DecodingError, InvalidCountError, RandomSourceError, WalletError
from .export import export_rows, parse_export, render_export
from .models import MAX_BATCH_SIZE, MIN_BATCH_SIZE, PUBLIC_KEY_LENGTH, SECRET_KEY_LENGTH, Batch, KeyPair
from .types import ExportFormat, ExportRow, KeySelection

__all__ = [
    "generate_batch", "coerce_count", "validate_count", "DEFAULT_WALLET_COUNT",
    "generate_keypair", "encode_secret", "encode_public", "decode", "decode_public", "keypair_from_secret",
    "render_export", "export_rows", "parse_export",
    "KeyPair", "Batch", "MIN_BATCH_SIZE", "MAX_BATCH_SIZE", "PUBLIC_KEY_LENGTH", "SECRET_KEY_LENGTH",
    "ExportFormat", "KeySelection", "ExportRow",
    "WalletError", "InvalidCountError", "DecodingError", "RandomSourceError",
]
