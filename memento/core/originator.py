"""Originator - the object whose state is snapshotted and restored."""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from datetime import datetime
from typing import Callable

from ..errors import ConfigError
from .events import ChangeReason, HistoryObserver, NullObserver
from .snapshot import Memento, StringMemento


DEFAULT_INITIAL_STATE = "initial_state"
DEFAULT_TOKEN_LENGTH = 5
MAX_TOKEN_LENGTH = 32


@dataclass
class RestoreResult:
    """Result of a restore operation."""
    success: bool
    value: str | None = None
    error: str | None = None


def new_token() -> str:
    """Return a fresh random token (32 uppercase hex digits of a uuid4)."""
    return uuid.uuid4().hex.upper()


def check_token_length(value: object) -> int:
    """Validate a token length.

    Raises:
        ConfigError: If ``value`` is not an int in 1..MAX_TOKEN_LENGTH
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(f"tokenLength must be an integer, got {type(value).__name__}")
    if not 1 <= value <= MAX_TOKEN_LENGTH:
        raise ConfigError(f"tokenLength must be between 1 and {MAX_TOKEN_LENGTH}, got {value}")
    return value


class Originator:
    """Holds a single string state and trades it for opaque snapshots."""

    def __init__(
        self,
        initial_state: str = DEFAULT_INITIAL_STATE,
        *,
        observer: HistoryObserver | None = None,
        token_length: int = DEFAULT_TOKEN_LENGTH,
        token_factory: Callable[[], str] | None = None,
    ):
        """Initialize originator.

        Args:
            initial_state: Starting state value
            observer: Receives change notifications (defaults to a no-op)
            token_length: Number of characters kept from each new token
            token_factory: Source of raw tokens for ``mutate`` (defaults to uuid4)

        Raises:
            ConfigError: If the initial state is not a string or the token
                length is not an int between 1 and MAX_TOKEN_LENGTH
        """
        if not isinstance(initial_state, str):
            raise ConfigError(f"initial_state must be a string, got {type(initial_state).__name__}")

        self._state = initial_state
        self._token_length = check_token_length(token_length)
        self._token_factory = token_factory or new_token
        self.observer: HistoryObserver = observer or NullObserver()
        self.identity = uuid.uuid4().hex

    @property
    def state(self) -> str:
        """Current state (read-only)."""
        return self._state

    def mutate(self) -> str:
        """Replace the state with a freshly generated token.

        Returns:
            The new state
        """
        new_value = self._token_factory()[: self._token_length]
        self._set_state(new_value, reason="mutate")
        return new_value

    def get_current_memento(self) -> Memento:
        """Capture the current state into a new snapshot."""
        return StringMemento(timestamp=datetime.now(), value=self._state, origin=self.identity)

    def restore(self, memento: object) -> RestoreResult:
        """Restore state from a snapshot this originator produced.

        Snapshots of another type, or taken from another originator, leave
        the state untouched and are reported to the observer.

        Args:
            memento: Snapshot to restore from

        Returns:
            RestoreResult with success status and the restored value
        """
        if not isinstance(memento, Memento):
            return self._reject(memento, f"Not a memento: {type(memento).__name__}")

        value = memento.payload_for(self.identity)
        if value is None:
            return self._reject(memento, f"{type(memento).__name__} was not produced by this originator")

        self._set_state(value, reason="restore")
        return RestoreResult(success=True, value=value)

    def _reject(self, memento: object, reason: str) -> RestoreResult:
        self.observer.restore_rejected(memento, reason)
        return RestoreResult(success=False, error=reason)

    def _set_state(self, value: str, reason: ChangeReason) -> None:
        old = self._state
        self._state = value
        self.observer.state_changed(old, value, reason)
