"""Utility modules for Memento."""

from .env import is_debug_mode, is_truthy

__all__ = [
    "is_debug_mode",
    "is_truthy",
]
