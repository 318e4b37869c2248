"""Custom exceptions for hashetag."""

from __future__ import annotations


class HashetagError(Exception):
    """Base exception for all hashetag errors."""


class ConfigError(HashetagError):
    """Configuration file errors."""


class UnsupportedAlgorithmError(HashetagError, ValueError):
    """Hash algorithm not available in this interpreter."""
