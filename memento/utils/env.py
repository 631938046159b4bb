"""Environment utilities for Memento."""

from __future__ import annotations

import os

TRUTHY = ("1", "true", "yes", "on")


def is_truthy(value: object) -> bool:
    """Interpret a flag given as bool, int or text ("1", "true", "yes", "on")."""
    if isinstance(value, str):
        return value.strip().lower() in TRUTHY
    return bool(value)


def is_debug_mode() -> bool:
    """Check if debug mode is requested by the environment.

    Returns:
        True if MEMENTO_DEBUG is set to a truthy value
    """
    return is_truthy(os.environ.get("MEMENTO_DEBUG", ""))
