"""hashetag - HTTP ETags from hash digests."""

from __future__ import annotations

from pathlib import Path

from hashetag.config import EtagConfig, load_etag_config
from hashetag.core.etag import DEFAULT_LENGTH, Etag, SupportsDigest, effective_length
from hashetag.core.hasher import Accumulator, get_hasher, hash_file
from hashetag.exceptions import ConfigError, HashetagError, UnsupportedAlgorithmError

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_LENGTH",
    "Accumulator",
    "ConfigError",
    "Etag",
    "EtagConfig",
    "HashetagError",
    "SupportsDigest",
    "UnsupportedAlgorithmError",
    "__version__",
    "effective_length",
    "etag_for_content",
    "etag_for_file",
    "get_hasher",
    "hash_file",
    "make_etag",
]


def make_etag(hasher: SupportsDigest, config: EtagConfig) -> str:
    """Render an ETag for ``hasher`` using the length and form from ``config``."""
    return Etag(hasher, config.length).etag(weak=config.weak)


def etag_for_content(data: bytes, config: EtagConfig | None = None) -> str:
    """Hash ``data`` with the configured algorithm and render its ETag."""
    config = config or EtagConfig()
    return make_etag(Accumulator(config.algorithm).update(data), config)


def etag_for_file(path: Path, config_path: Path | None = None) -> str:
    """Stream ``path`` through the configured hash and render its ETag.

    Settings come from ``config_path`` or the usual config file search.

    Raises:
        ConfigError: If a config file exists but is invalid.
    """
    config = load_etag_config(config_path)
    return make_etag(hash_file(path, algorithm=config.algorithm), config)
