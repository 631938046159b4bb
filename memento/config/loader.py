"""Configuration loader for Memento.

Priority (highest to lowest):
1. Explicit overrides (CLI flags)
2. Environment (MEMENTO_DEBUG)
3. Default values
"""

from __future__ import annotations

from typing import Any, Mapping

from ..utils.env import is_debug_mode
from .types import DemoConfig


def load_config(overrides: Mapping[str, Any] | None = None) -> DemoConfig:
    """Build a validated DemoConfig.

    Args:
        overrides: camelCase keys as accepted by ``DemoConfig.from_dict``;
            None values are ignored, so an unset flag keeps the lower layer

    Returns:
        Merged DemoConfig

    Raises:
        ConfigError: If the merged values are invalid
    """
    merged: dict[str, Any] = DemoConfig().to_dict()
    merged["debug"] = is_debug_mode()

    for key, value in (overrides or {}).items():
        if value is not None:
            merged[key] = value

    return DemoConfig.from_dict(merged).validate()
