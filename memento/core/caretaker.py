"""Caretaker - ordered snapshot history for one originator.

The history is a stack: ``backup`` pushes, ``undo`` pops. A popped
snapshot is consumed, there is no redo.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator

from .events import HistoryObserver, NullObserver
from .originator import Originator
from .snapshot import Memento


EMPTY_HISTORY_ERROR = "Nothing to undo: history is empty"


@dataclass
class UndoResult:
    """Result of an undo operation."""
    success: bool
    memento: Memento | None = None
    error: str | None = None


class HistoryView:
    """Read-only, restartable view over a caretaker's records.

    Each iteration walks the records as they are at that moment.
    """

    def __init__(self, records: list[Memento]):
        self._records = records

    def __iter__(self) -> Iterator[Memento]:
        for memento in self._records:
            yield memento

    def __len__(self) -> int:
        return len(self._records)


class Caretaker:
    """Stores snapshots of one originator and drives backup/undo."""

    def __init__(
        self,
        originator: Originator,
        records: Iterable[Memento] | None = None,
        *,
        observer: HistoryObserver | None = None,
    ):
        """Initialize caretaker.

        Args:
            originator: The originator whose snapshots are managed
            records: Optional snapshots to seed the history with (copied)
            observer: Receives history notifications (defaults to a no-op)
        """
        self.originator = originator
        self._records: list[Memento] = list(records or [])
        self.observer: HistoryObserver = observer or NullObserver()

    @property
    def history_size(self) -> int:
        return len(self._records)

    @property
    def can_undo(self) -> bool:
        return len(self._records) > 0

    def backup(self) -> Memento:
        """Save the originator's current snapshot at the end of the history.

        Returns:
            The stored snapshot
        """
        memento = self.originator.get_current_memento()
        self.observer.snapshot_saved(memento)
        self._records.append(memento)
        return memento

    def undo(self) -> UndoResult:
        """Pop the most recent snapshot and restore the originator to it.

        Returns:
            UndoResult; unsuccessful when the history is empty or the
            originator rejected the snapshot
        """
        if not self._records:
            self.observer.undo_unavailable()
            return UndoResult(success=False, error=EMPTY_HISTORY_ERROR)

        memento = self._records.pop()
        restored = self.originator.restore(memento)
        if restored.success:
            self.observer.snapshot_restored(memento)
        return UndoResult(success=restored.success, memento=memento, error=restored.error)

    def show_history(self) -> HistoryView:
        """Return a view over the stored snapshots, oldest first."""
        view = HistoryView(self._records)
        self.observer.history_listed(view)
        return view
