"""Key pair and batch models."""
from dataclasses import dataclass

SECRET_KEY_LENGTH = 64
PUBLIC_KEY_LENGTH = 32
SEED_LENGTH = 32

MIN_BATCH_SIZE = 1
MAX_BATCH_SIZE = 1000


@dataclass(frozen=True)
class KeyPair:
    """An Ed25519 key pair in the Solana layout.

    Attributes:
        secret_key: 64 bytes, the 32-byte seed followed by the public key.
        public_key: 32 bytes, the key paired with ``secret_key``.
    """

    secret_key: bytes
    public_key: bytes

    def __post_init__(self) -> None:
        if len(self.secret_key) != SECRET_KEY_LENGTH:
            raise ValueError(f"secret_key must be {SECRET_KEY_LENGTH} bytes, got {len(self.secret_key)}")
        if len(self.public_key) != PUBLIC_KEY_LENGTH:
            raise ValueError(f"public_key must be {PUBLIC_KEY_LENGTH} bytes, got {len(self.public_key)}")
        if self.secret_key[SEED_LENGTH:] != self.public_key:
            raise ValueError("public_key does not match secret_key")

    @property
    def seed(self) -> bytes:
        return self.secret_key[:SEED_LENGTH]

    def __repr__(self) -> str:
        return f"KeyPair(public_key={self.public_key.hex()[:16]}...)"


@dataclass(frozen=True)
class Batch:
    """The key pairs produced by one generation call.

    Attributes:
        key_pairs: Generated pairs in request order.
        include_public_key: Whether public keys are rendered alongside secrets.
        generation_time_ms: Wall-clock time spent generating the batch.
    """

    key_pairs: tuple[KeyPair, ...]
    include_public_key: bool
    generation_time_ms: float

    def __post_init__(self) -> None:
        if not (MIN_BATCH_SIZE <= len(self.key_pairs) <= MAX_BATCH_SIZE):
            raise ValueError(
                f"batch must hold {MIN_BATCH_SIZE}-{MAX_BATCH_SIZE} key pairs, got {len(self.key_pairs)}"
            )
        if self.generation_time_ms < 0:
            raise ValueError("generation_time_ms cannot be negative")

    @property
    def count(self) -> int:
        return len(self.key_pairs)
