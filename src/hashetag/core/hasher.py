"""Content hashing for hashetag."""

from __future__ import annotations

import hashlib
from pathlib import Path

from hashetag.exceptions import UnsupportedAlgorithmError

DEFAULT_ALGORITHM = "sha256"
DEFAULT_CHUNK_SIZE = 64 * 1024


def get_hasher(algorithm: str = DEFAULT_ALGORITHM) -> hashlib._Hash:
    """Get a hashlib hasher by name.

    Args:
        algorithm: Name understood by hashlib.new (e.g. "sha256", "md5").

    Returns:
        Fresh hasher object.

    Raises:
        UnsupportedAlgorithmError: If the algorithm is not available.
    """
    if algorithm.lower().startswith("shake_"):
        # Variable-length digests have no native size.
        raise UnsupportedAlgorithmError(f"Unsupported hash algorithm: {algorithm}")
    try:
        return hashlib.new(algorithm)
    except (ValueError, TypeError) as e:
        raise UnsupportedAlgorithmError(f"Unsupported hash algorithm: {algorithm}") from e


class Accumulator:
    """Streaming hash that can be fed, reset and read without finalizing.

    Usage:
        acc = Accumulator("sha256")
        acc.update(b"chunk 1").update(b"chunk 2")
        acc.digest()  # does not stop further updates
        acc.reset()
    """

    def __init__(self, algorithm: str = DEFAULT_ALGORITHM) -> None:
        self._hasher = get_hasher(algorithm)
        self._algorithm = algorithm

    @property
    def name(self) -> str:
        """Return the algorithm name."""
        return self._hasher.name

    @property
    def digest_size(self) -> int:
        """Return the native digest size in bytes."""
        return self._hasher.digest_size

    def update(self, data: bytes) -> Accumulator:
        """Feed more bytes into the running hash."""
        self._hasher.update(data)
        return self

    def reset(self) -> None:
        """Discard everything written so far."""
        self._hasher = get_hasher(self._algorithm)

    def digest(self) -> bytes:
        """Return the digest of everything written so far."""
        return self._hasher.digest()

    def hexdigest(self) -> str:
        """Return the current digest as a hex string."""
        return self._hasher.hexdigest()


def hash_file(
    path: Path,
    algorithm: str = DEFAULT_ALGORITHM,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> Accumulator:
    """Stream a file into a new accumulator.

    Args:
        path: File to read.
        algorithm: Hash algorithm name.
        chunk_size: Bytes read per iteration.

    Returns:
        Accumulator holding the file's running hash.
    """
    acc = Accumulator(algorithm)
    with path.open("rb") as f:
        while chunk := f.read(chunk_size):
            acc.update(chunk)
    return acc
