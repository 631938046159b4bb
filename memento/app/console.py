"""Console rendering of originator and caretaker notifications."""

from __future__ import annotations

import sys
from typing import IO, Iterable

from ..core.events import ChangeReason
from ..core.snapshot import Memento


class ConsoleObserver:
    """Prints one human-readable line per notification.

    Warnings go to ``err`` (stderr by default), everything else to ``out``.
    """

    def __init__(self, out: IO[str] | None = None, err: IO[str] | None = None):
        self._out = out
        self._err = err

    @property
    def out(self) -> IO[str]:
        return self._out if self._out is not None else sys.stdout

    @property
    def err(self) -> IO[str]:
        return self._err if self._err is not None else sys.stderr

    def state_changed(self, old: str, new: str, reason: ChangeReason) -> None:
        print(f"Originator.{reason}: state changed from {old} to {new}", file=self.out)

    def snapshot_saved(self, memento: Memento) -> None:
        print(f"Caretaker.backup: saving {memento}", file=self.out)

    def snapshot_restored(self, memento: Memento) -> None:
        print(f"Caretaker.undo: restored {memento}", file=self.out)

    def undo_unavailable(self) -> None:
        print("Caretaker.undo: unable to undo, history is empty", file=self.err)

    def restore_rejected(self, memento: object, reason: str) -> None:
        print(f"Originator.restore: rejected snapshot ({reason})", file=self.err)

    def history_listed(self, history: Iterable[Memento]) -> None:
        print("\nCaretaker.show_history:\n", file=self.out)
        for memento in history:
            print(f"  {memento}", file=self.out)
        print("", file=self.out)


class DebugLog:
    """Writes ``[memento] ...`` lines to stderr when enabled."""

    def __init__(self, enabled: bool, err: IO[str] | None = None):
        self.enabled = enabled
        self._err = err

    def __call__(self, message: str) -> None:
        if self.enabled:
            print(f"[memento] {message}", file=self._err if self._err is not None else sys.stderr)
