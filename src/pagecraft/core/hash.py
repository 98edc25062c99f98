"""Fast hashing for document digests and cache keys.

xxhash64 for render-cache keys, SHA256 when a stable cross-tool digest is needed.
"""

from typing import Any, Protocol
from enum import Enum
import hashlib

import orjson
import xxhash


class Algorithm(str, Enum):
    """Supported hash algorithms."""

    XXHASH64 = "xxhash64"  # Fast, non-cryptographic (cache keys)
    SHA256 = "sha256"      # Stable digests for exported files


class Hasher(Protocol):
    """Protocol for hash implementations."""

    def digest(self, data: bytes) -> str:
        """Compute hex digest of data."""
        ...


class XXHasher:
    """Ultra-fast non-cryptographic hasher."""

    def digest(self, data: bytes) -> str:
        """Compute xxhash64 hex digest."""
        return xxhash.xxh64(data).hexdigest()


class SHA256Hasher:
    """Secure cryptographic hasher."""

    def digest(self, data: bytes) -> str:
        """Compute SHA256 hex digest."""
        return hashlib.sha256(data).hexdigest()


def create_hasher(algorithm: Algorithm = Algorithm.XXHASH64) -> Hasher:
    """
    Create hasher instance.

    Raises:
        ValueError: If the algorithm is unknown
    """
    if algorithm == Algorithm.XXHASH64:
        return XXHasher()
    elif algorithm == Algorithm.SHA256:
        return SHA256Hasher()
    else:
        raise ValueError(f"Unknown algorithm: {algorithm}")


def hash_string(
    text: str,
    algorithm: Algorithm = Algorithm.XXHASH64,
    truncate: int | None = None
) -> str:
    """
    Hash string to hex digest.

    Args:
        text: String to hash
        algorithm: Hash algorithm (default: xxhash64 for speed)
        truncate: Optional length to truncate digest

    Returns:
        Hex digest string
    """
    digest = create_hasher(algorithm).digest(text.encode("utf-8"))

    if truncate:
        return digest[:truncate]
    return digest


def hash_json(
    obj: Any,
    algorithm: Algorithm = Algorithm.XXHASH64,
    sort_keys: bool = True
) -> str:
    """
    Hash the compact JSON encoding of a value.

    Args:
        obj: JSON-serializable value
        algorithm: Hash algorithm
        sort_keys: Sort mapping keys first, so structurally equal values hash
            equal. Pass False when key order changes the meaning, as it does
            for rendered style declarations.
    """
    data = orjson.dumps(obj, option=orjson.OPT_SORT_KEYS if sort_keys else None)
    return create_hasher(algorithm).digest(data)


__all__ = [
    "Algorithm",
    "Hasher",
    "create_hasher",
    "hash_string",
    "hash_json",
]
