from __future__ import annotations

import pytest


class RecordingObserver:
    """Collects notifications as (kind, *details) tuples."""

    def __init__(self):
        self.events: list[tuple] = []

    def kinds(self) -> list[str]:
        return [e[0] for e in self.events]

    def state_changed(self, old, new, reason):
        self.events.append(("state_changed", old, new, reason))

    def snapshot_saved(self, memento):
        self.events.append(("snapshot_saved", memento))

    def snapshot_restored(self, memento):
        self.events.append(("snapshot_restored", memento))

    def undo_unavailable(self):
        self.events.append(("undo_unavailable",))

    def restore_rejected(self, memento, reason):
        self.events.append(("restore_rejected", memento, reason))

    def history_listed(self, history):
        self.events.append(("history_listed", list(history)))


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch: pytest.MonkeyPatch):
    """Keep a developer's MEMENTO_DEBUG from leaking into tests."""

    monkeypatch.setenv("MEMENTO_DEBUG", "0")


@pytest.fixture
def observer():
    return RecordingObserver()


@pytest.fixture
def tokens():
    """Deterministic token source: AAAAA..., BBBBB..., CCCCC..."""

    def factory():
        letter = chr(ord("A") + factory.calls % 26)
        factory.calls += 1
        return letter * 8

    factory.calls = 0
    return factory
