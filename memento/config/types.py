"""Configuration schemas for Memento."""

from __future__ import annotations

from dataclasses import dataclass

from ..core.originator import DEFAULT_INITIAL_STATE, DEFAULT_TOKEN_LENGTH, check_token_length
from ..errors import ConfigError
from ..utils.env import is_truthy


@dataclass
class DemoConfig:
    """Settings for building and running the demo pair."""
    initial_state: str = DEFAULT_INITIAL_STATE
    token_length: int = DEFAULT_TOKEN_LENGTH
    debug: bool = False

    @classmethod
    def from_dict(cls, data: dict) -> DemoConfig:
        """Create DemoConfig from dictionary."""
        defaults = cls()
        return cls(
            initial_state=data.get("initialState", defaults.initial_state),
            token_length=data.get("tokenLength", defaults.token_length),
            debug=is_truthy(data.get("debug", defaults.debug)),
        )

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "initialState": self.initial_state,
            "tokenLength": self.token_length,
            "debug": self.debug,
        }

    def validate(self) -> DemoConfig:
        """Check field values.

        Returns:
            self, for chaining

        Raises:
            ConfigError: If a value is out of range
        """
        if not isinstance(self.initial_state, str):
            raise ConfigError("initialState must be a string")
        check_token_length(self.token_length)
        return self
