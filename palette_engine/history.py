"""Undo/redo history as pure state transitions.

Every transition takes a ``HistoryState`` and returns a new one; nothing is
mutated. ``History`` wraps a state behind a lock for callers that share one
history between threads.
"""

import threading
from collections import namedtuple


class HistoryState(namedtuple("HistoryState", ["entries", "index"])):
    """Snapshots plus a cursor. ``index`` is -1 only when there are no entries."""

    __slots__ = ()

    @property
    def current(self):
        return self.entries[self.index] if self.index >= 0 else None

    @property
    def can_undo(self):
        return self.index > 0

    @property
    def can_redo(self):
        return 0 <= self.index < len(self.entries) - 1


def empty():
    return HistoryState((), -1)


def initial(entries, index=None):
    return replace(empty(), entries, index)


def push(state, value):
    """Append a snapshot, discarding any redo-able future first."""
    entries = tuple(state.entries)
    if state.index < len(entries) - 1:
        entries = entries[: state.index + 1]
    return HistoryState(entries + (value,), state.index + 1)


def undo(state):
    if state.index > 0:
        return state._replace(index=state.index - 1)
    return state


def redo(state):
    if state.index < len(state.entries) - 1:
        return state._replace(index=state.index + 1)
    return state


def replace(state, entries, index=None):
    """Swap in a whole new history (loaded or shared palette).

    The cursor defaults to the last entry and is clamped into
    ``[-1, len(entries) - 1]``.
    """
    entries = tuple(entries)
    if not entries:
        return HistoryState((), -1)
    target = len(entries) - 1 if index is None else index
    return HistoryState(entries, max(-1, min(target, len(entries) - 1)))


def jump_to(state, index):
    """Move the cursor without touching entries, clamped into range."""
    if not state.entries:
        return state
    return state._replace(index=max(0, min(index, len(state.entries) - 1)))


class History:
    """Thread-safe holder for a HistoryState."""

    def __init__(self, entries=(), index=None):
        self._lock = threading.Lock()
        self._state = initial(entries, index)

    @property
    def state(self):
        with self._lock:
            return self._state

    @property
    def current(self):
        return self.state.current

    @property
    def can_undo(self):
        return self.state.can_undo

    @property
    def can_redo(self):
        return self.state.can_redo

    def _apply(self, transition, *args):
        with self._lock:
            self._state = transition(self._state, *args)
            return self._state

    def push(self, value):
        return self._apply(push, value)

    def undo(self):
        return self._apply(undo)

    def redo(self):
        return self._apply(redo)

    def replace(self, entries, index=None):
        return self._apply(replace, entries, index)

    def jump_to(self, index):
        return self._apply(jump_to, index)
