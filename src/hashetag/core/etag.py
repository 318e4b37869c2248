"""Render hash digests as HTTP ETag header values."""

from __future__ import annotations

import logging
from typing import Protocol

logger = logging.getLogger(__name__)

DEFAULT_LENGTH = 32


class SupportsDigest(Protocol):
    """Anything exposing a native digest size and a non-destructive digest()."""

    @property
    def digest_size(self) -> int: ...

    def digest(self) -> bytes: ...


def effective_length(requested: int, digest_size: int) -> int:
    """Resolve how many hex characters an ETag carries.

    Zero means the default length. Requests longer than the digest can
    represent are clamped to ``2 * digest_size``; negative requests give an
    empty payload.

    Args:
        requested: Requested number of hex characters (0 for default).
        digest_size: Native digest size of the hash in bytes.

    Returns:
        Number of hex characters to emit.
    """
    length = requested if requested != 0 else DEFAULT_LENGTH
    cap = 2 * digest_size
    if length > cap:
        logger.debug("Clamping ETag length %d to %d for %d-byte digest", length, cap, digest_size)
        return cap
    return max(length, 0)


class Etag:
    """Strong and weak ETags from a borrowed hash accumulator.

    The accumulator is read, never reset or finalized, so it can keep
    receiving data between calls.
    """

    def __init__(self, hasher: SupportsDigest, length: int = 0) -> None:
        self.hasher = hasher
        self.requested_length = length

    def __repr__(self) -> str:
        return f"Etag(hasher={self.hasher!r}, length={self.requested_length})"

    @property
    def length(self) -> int:
        """Number of hex characters in the quoted payload."""
        return effective_length(self.requested_length, self.hasher.digest_size)

    def _payload(self) -> str:
        length = self.length
        digest = self.hasher.digest()
        # Odd lengths drop the low nibble of the last encoded byte.
        return digest[: (length + 1) // 2].hex()[:length]

    def strong_etag(self) -> str:
        """Return the strong ETag, e.g. ``"9f86d081"``."""
        return f'"{self._payload()}"'

    def weak_etag(self) -> str:
        """Return the weak ETag, e.g. ``W/"9f86d081"``."""
        return f'W/"{self._payload()}"'

    def etag(self, weak: bool = False) -> str:
        """Return the weak ETag if ``weak`` is set, otherwise the strong one."""
        return self.weak_etag() if weak else self.strong_etag()
