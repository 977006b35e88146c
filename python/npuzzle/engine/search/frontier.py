"""Priority frontier with per-state deduplication.

Entries live in a binary heap ordered by ``(priority, sequence)``; the
sequence number makes ties pop in insertion order. Replacing an entry
marks the old heap slot as removed and pushes a new one, following the
lazy-deletion recipe from the :mod:`heapq` documentation.
"""

from __future__ import annotations

import heapq
import itertools
from collections.abc import Callable, Hashable
from typing import Optional

from npuzzle.models.node import Node

EvalFn = Callable[[Node], float]
Fingerprint = Callable[[object], Hashable]


def fingerprint_of(state: object) -> Hashable:
    """Use ``state.fingerprint()`` when the state offers one, else the state."""
    method = getattr(state, "fingerprint", None)
    if callable(method):
        return method()
    return state  # type: ignore[return-value]


class _Entry:
    __slots__ = ("priority", "seq", "node", "key", "removed")

    def __init__(self, priority: float, seq: int, node: Node, key: Hashable) -> None:
        self.priority = priority
        self.seq = seq
        self.node = node
        self.key = key
        self.removed = False

    def __lt__(self, other: _Entry) -> bool:
        return (self.priority, self.seq) < (other.priority, other.seq)


class PriorityFrontier:
    """Frontier keyed by an evaluation function, unique on state."""

    def __init__(self, evaluate: EvalFn, fingerprint: Fingerprint = fingerprint_of) -> None:
        self._evaluate = evaluate
        self._fingerprint = fingerprint
        self._heap: list[_Entry] = []
        self._index: dict[Hashable, _Entry] = {}
        self._counter = itertools.count()

    # -- queries --------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._index)

    def __bool__(self) -> bool:
        return bool(self._index)

    def __contains__(self, state: object) -> bool:
        return self._fingerprint(state) in self._index

    def lookup(self, state: object) -> Optional[Node]:
        """Return the queued node for *state*, or ``None``."""
        entry = self._index.get(self._fingerprint(state))
        return entry.node if entry is not None else None

    def priority_of(self, state: object) -> Optional[float]:
        entry = self._index.get(self._fingerprint(state))
        return entry.priority if entry is not None else None

    # -- mutation -------------------------------------------------------------

    def push(self, node: Node) -> bool:
        """Queue *node* unless its state is already queued at an equal or better priority.

        Returns True if the node was queued (either as a new entry or as a
        replacement for a worse one).
        """
        key = self._fingerprint(node.state)
        priority = self._evaluate(node)
        existing = self._index.get(key)
        if existing is not None:
            if priority >= existing.priority:
                return False
            existing.removed = True
        entry = _Entry(priority, next(self._counter), node, key)
        self._index[key] = entry
        heapq.heappush(self._heap, entry)
        return True

    def pop(self) -> Node:
        """Remove and return the node with the lowest ``(priority, sequence)``."""
        while self._heap:
            entry = heapq.heappop(self._heap)
            if not entry.removed:
                del self._index[entry.key]
                return entry.node
        raise IndexError("pop from an empty frontier")

    def clear(self) -> None:
        self._heap.clear()
        self._index.clear()
