"""Core modules for Memento."""

from .caretaker import Caretaker, HistoryView, UndoResult
from .events import HistoryObserver, NullObserver
from .originator import Originator, RestoreResult
from .snapshot import Memento, StringMemento

__all__ = [
    "Caretaker",
    "HistoryView",
    "UndoResult",
    "HistoryObserver",
    "NullObserver",
    "Originator",
    "RestoreResult",
    "Memento",
    "StringMemento",
]
