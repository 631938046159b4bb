"""Snapshot types.

A ``Memento`` only tells the outside world when it was taken. The captured
state lives on the concrete variant and is handed out through
``payload_for``, which answers only the originator that produced it.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Memento:
    """Opaque snapshot: generic holders can only read the timestamp."""
    timestamp: datetime

    def payload_for(self, identity: str) -> str | None:
        """Return the captured state if ``identity`` may read it.

        The base type carries no payload, so the answer is always None.
        """
        return None

    def describe(self) -> str:
        return f"{type(self).__name__} | savedAt: {self.saved_at}"

    @property
    def saved_at(self) -> str:
        """Wall-clock time of capture as HH:MM:SS."""
        return self.timestamp.strftime("%H:%M:%S")

    def __str__(self) -> str:
        return self.describe()


@dataclass(frozen=True)
class StringMemento(Memento):
    """Snapshot of a string state, readable only by its originator."""
    value: str
    origin: str

    def payload_for(self, identity: str) -> str | None:
        if identity != self.origin:
            return None
        return self.value

    def describe(self) -> str:
        return f"{type(self).__name__} with state {self.value} | savedAt: {self.saved_at}"
