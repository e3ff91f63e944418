"""Ed25519 key pair generation and base-58 encoding."""

import base58
from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PrivateKey
from cryptography.hazmat.primitives.serialization import Encoding, NoEncryption, PrivateFormat, PublicFormat

from .exceptions import DecodingError, RandomSourceError
from .models import PUBLIC_KEY_LENGTH, SECRET_KEY_LENGTH, SEED_LENGTH, KeyPair


def _keypair_from_private_key(private_key: Ed25519PrivateKey) -> KeyPair:
    seed = private_key.private_bytes(Encoding.Raw, PrivateFormat.Raw, NoEncryption())
    public = private_key.public_key().public_bytes(Encoding.Raw, PublicFormat.Raw)
    return KeyPair(secret_key=seed + public, public_key=public)


def generate_keypair() -> KeyPair:
    """Generate a new Ed25519 key pair from the system CSPRNG."""
    try:
        private_key = Ed25519PrivateKey.generate()
    except Exception as e:
        raise RandomSourceError(f"Failed to generate key pair: {e}") from e
    return _keypair_from_private_key(private_key)


def encode_secret(secret_key: bytes) -> str:
    """Encode 64-byte secret key material as base-58."""
    return base58.b58encode(secret_key).decode("ascii")


def encode_public(public_key: bytes) -> str:
    """Encode a 32-byte public key as a base-58 address."""
    return base58.b58encode(public_key).decode("ascii")


def decode(encoded: str) -> bytes:
    """Decode base-58 text into raw bytes. Raises DecodingError if malformed."""
    if not isinstance(encoded, str):
        raise DecodingError(f"Expected base-58 text, got {type(encoded).__name__}")
    text = encoded.strip()
    if not text:
        raise DecodingError("Cannot decode empty base-58 text")
    try:
        return base58.b58decode(text)
    except ValueError as e:
        raise DecodingError(f"Invalid base-58 encoding: {e}") from e


def decode_public(encoded: str) -> bytes:
    """Decode a base-58 address into its 32-byte public key."""
    raw = decode(encoded)
    if len(raw) != PUBLIC_KEY_LENGTH:
        raise DecodingError(f"Public key must decode to {PUBLIC_KEY_LENGTH} bytes, got {len(raw)}")
    return raw


def keypair_from_secret(encoded: str) -> KeyPair:
    """Rebuild a KeyPair from a base-58 secret key.

    The trailing 32 bytes of the secret must be the public key derived from
    its seed, otherwise the text is rejected.

    Raises:
        DecodingError: If the text is not base-58, has the wrong length, or
            carries a public key that does not belong to its seed.
    """
    raw = decode(encoded)
    if len(raw) != SECRET_KEY_LENGTH:
        raise DecodingError(f"Secret key must decode to {SECRET_KEY_LENGTH} bytes, got {len(raw)}")
    derived = _keypair_from_private_key(Ed25519PrivateKey.from_private_bytes(raw[:SEED_LENGTH]))
    if derived.secret_key != raw:
        raise DecodingError("Secret key does not contain the public key derived from its seed")
    return derived
