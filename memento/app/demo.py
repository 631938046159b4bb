"""Construction helpers and the scripted demo run."""

from __future__ import annotations

from ..core.caretaker import Caretaker
from ..core.events import HistoryObserver
from ..core.originator import DEFAULT_INITIAL_STATE, DEFAULT_TOKEN_LENGTH, Originator

DEMO_UNDO_COUNT = 5


def make_pair(
    initial_state: str = DEFAULT_INITIAL_STATE,
    *,
    observer: HistoryObserver | None = None,
    token_length: int = DEFAULT_TOKEN_LENGTH,
) -> tuple[Originator, Caretaker]:
    """Create an originator and a caretaker bound to it.

    Both share ``observer`` so their notifications interleave in order.
    """
    originator = Originator(initial_state, observer=observer, token_length=token_length)
    caretaker = Caretaker(originator, observer=observer)
    return originator, caretaker


def run_demo(originator: Originator, caretaker: Caretaker) -> int:
    """Run the fixed walkthrough: two edits, three backups, five undos.

    The last two undos hit an empty history and are reported, not raised.
    """
    originator.mutate()
    caretaker.backup()
    originator.mutate()
    caretaker.backup()
    caretaker.backup()
    caretaker.show_history()
    for _ in range(DEMO_UNDO_COUNT):
        caretaker.undo()
    return 0
