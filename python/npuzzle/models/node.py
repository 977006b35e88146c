"""Search-tree vertex."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Optional, TypeVar

S = TypeVar("S")
A = TypeVar("A")


@dataclass(eq=False)
class Node(Generic[S, A]):
    """A state wrapped with the bookkeeping needed to rebuild its path.

    ``parent`` is ``None`` for the root, and also for every node created
    while parent-link tracking is disabled. ``path_cost`` is g(n), the sum
    of step costs from the root; ``depth`` counts the edges from the root.
    """

    state: S
    parent: Optional[Node[S, A]] = None
    action: Optional[A] = None
    path_cost: float = 0
    depth: int = 0

    @property
    def is_root(self) -> bool:
        return self.action is None

    def path(self) -> list[Node[S, A]]:
        """Nodes from the earliest reachable ancestor down to this one."""
        nodes: list[Node[S, A]] = []
        node: Optional[Node[S, A]] = self
        while node is not None:
            nodes.append(node)
            node = node.parent
        nodes.reverse()
        return nodes

    def __repr__(self) -> str:
        state: Any = self.state
        return (
            f"Node(action={self.action!s}, g={self.path_cost}, "
            f"depth={self.depth}, state={state!r})"
        )
