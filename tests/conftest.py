"""Shared fixtures for hashetag tests."""

from __future__ import annotations

from pathlib import Path

import pytest


class FixedDigest:
    """Accumulator stand-in whose digest is a fixed byte string."""

    def __init__(self, data: bytes) -> None:
        self.data = bytes(data)
        self.writes = 0

    @property
    def digest_size(self) -> int:
        return len(self.data)

    def update(self, data: bytes) -> None:
        self.writes += 1

    def reset(self) -> None:
        pass

    def digest(self) -> bytes:
        return self.data


@pytest.fixture
def fixed_digest() -> type[FixedDigest]:
    """Return the fixed-digest accumulator class."""
    return FixedDigest


@pytest.fixture
def zero_digest() -> FixedDigest:
    """Return an accumulator producing 128 zero bytes."""
    return FixedDigest(bytes(128))


@pytest.fixture
def chdir_tmp(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the test from an empty temporary directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def sample_config_yaml() -> str:
    """Return a sample config.yaml content."""
    return """version: 1

etag:
  length: 16
  algorithm: sha512
  weak: true
"""


@pytest.fixture
def minimal_config_yaml() -> str:
    """Return a minimal config.yaml content."""
    return """version: 1
"""
