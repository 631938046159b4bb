"""Exceptions for Memento."""

from __future__ import annotations


class MementoError(Exception):
    """Base class for Memento errors."""


class ConfigError(MementoError, ValueError):
    """Raised when construction or CLI arguments are invalid."""
