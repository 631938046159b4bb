"""Notification interface shared by the originator and the caretaker.

Core objects never print. Everything a user might want to see is sent to
an observer, which the app layer renders on the console and tests record.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, Literal, Protocol

if TYPE_CHECKING:
    from .snapshot import Memento


ChangeReason = Literal["mutate", "restore"]


class HistoryObserver(Protocol):
    """Receives state and history notifications."""

    def state_changed(self, old: str, new: str, reason: ChangeReason) -> None: ...

    def snapshot_saved(self, memento: Memento) -> None: ...

    def snapshot_restored(self, memento: Memento) -> None: ...

    def undo_unavailable(self) -> None: ...

    def restore_rejected(self, memento: object, reason: str) -> None: ...

    def history_listed(self, history: Iterable[Memento]) -> None: ...


class NullObserver:
    """Observer that ignores every notification."""

    def state_changed(self, old: str, new: str, reason: ChangeReason) -> None:
        pass

    def snapshot_saved(self, memento: Memento) -> None:
        pass

    def snapshot_restored(self, memento: Memento) -> None:
        pass

    def undo_unavailable(self) -> None:
        pass

    def restore_rejected(self, memento: object, reason: str) -> None:
        pass

    def history_listed(self, history: Iterable[Memento]) -> None:
        pass
