"""Batch key pair generation."""
import logging
import time
from concurrent.futures import ThreadPoolExecutor
from typing import Optional

from .crypto import generate_keypair
from .exceptions import InvalidCountError
from .models import MAX_BATCH_SIZE, MIN_BATCH_SIZE, Batch, KeyPair

logger = logging.getLogger(__name__)

DEFAULT_WALLET_COUNT = 10


def coerce_count(value: Optional[str], default: int = DEFAULT_WALLET_COUNT) -> int:
    """Parse a free-form count, falling back to *default*.

    Missing, empty, non-numeric, zero and out-of-range text all yield the
    default. Strict range checking is left to :func:`generate_batch`.
    """
    if value is None:
        return default
    try:
        count = int(str(value).strip())
    except ValueError:
        return default
    if not (MIN_BATCH_SIZE <= count <= MAX_BATCH_SIZE):
        return default
    return count


def validate_count(count: int) -> int:
    """Return *count* if it is an int within the batch bounds."""
    if isinstance(count, bool) or not isinstance(count, int):
        raise InvalidCountError(count, MIN_BATCH_SIZE, MAX_BATCH_SIZE)
    if not (MIN_BATCH_SIZE <= count <= MAX_BATCH_SIZE):
        raise InvalidCountError(count, MIN_BATCH_SIZE, MAX_BATCH_SIZE)
    return count


def _generate_one(_index: int) -> KeyPair:
    return generate_keypair()


def generate_batch(
    count: int,
    include_public_key: bool,
    max_workers: Optional[int] = None,
) -> Batch:
    """Generate ``count`` independent key pairs.

    Args:
        count: Number of key pairs, 1-1000.
        include_public_key: Whether exports render public keys alongside secrets.
        max_workers: Thread pool size. ``None`` or 1 generates sequentially.

    Returns:
        A Batch whose key pairs are in request order.

    Raises:
        InvalidCountError: If count is outside 1-1000.
        RandomSourceError: If the random source fails. No partial batch is returned.
    """
    validate_count(count)
    start = time.perf_counter()
    if max_workers is not None and max_workers > 1 and count > 1:
        with ThreadPoolExecutor(max_workers=min(max_workers, count)) as pool:
            key_pairs = tuple(pool.map(_generate_one, range(count)))
    else:
        key_pairs = tuple(_generate_one(i) for i in range(count))
    elapsed_ms = (time.perf_counter() - start) * 1000
    logger.info("Generated %d key pairs in %.2fms", count, elapsed_ms)
    return Batch(
        key_pairs=key_pairs,
        include_public_key=include_public_key,
        generation_time_ms=elapsed_ms,
    )
