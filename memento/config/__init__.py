"""Configuration management for Memento."""

from .types import DemoConfig
from .loader import load_config

__all__ = [
    "DemoConfig",
    "load_config",
]
