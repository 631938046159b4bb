"""Memento - snapshot and undo for a single stateful object.

An originator hands out opaque snapshots of its state, a caretaker
keeps them in order and rolls the originator back on request.
"""

__version__ = "1.0.0"
