"""Node creation and expansion."""

from __future__ import annotations

from collections.abc import Callable
from typing import Generic, TypeVar

from npuzzle.engine.search.problem import Problem
from npuzzle.models.node import Node

S = TypeVar("S")
A = TypeVar("A")

NodeListener = Callable[[Node], None]


class NodeExpander(Generic[S, A]):
    """Builds nodes, computes path costs and counts expansions.

    Listeners are called synchronously, in registration order, with every
    node that gets expanded. A listener that raises aborts the search.
    """

    def __init__(self, use_parent_links: bool = True) -> None:
        self.use_parent_links = use_parent_links
        self.nodes_expanded = 0
        self._listeners: list[NodeListener] = []

    # -- node factories -------------------------------------------------------

    def root(self, state: S) -> Node[S, A]:
        return Node(state=state)

    def child(self, state: S, parent: Node[S, A], action: A, step_cost: float) -> Node[S, A]:
        return Node(
            state=state,
            parent=parent if self.use_parent_links else None,
            action=action,
            path_cost=parent.path_cost + step_cost,
            depth=parent.depth + 1,
        )

    # -- expansion ------------------------------------------------------------

    def expand(self, node: Node[S, A], problem: Problem[S, A]) -> list[Node[S, A]]:
        """Return the children of *node*, one per action of its state."""
        children: list[Node[S, A]] = []
        for action in problem.actions(node.state):
            successor = problem.result(node.state, action)
            cost = problem.step_cost(node.state, action, successor)
            children.append(self.child(successor, node, action, cost))
        self.nodes_expanded += 1
        self._notify(node)
        return children

    def reset(self) -> None:
        self.nodes_expanded = 0

    # -- listeners ------------------------------------------------------------

    def add_listener(self, listener: NodeListener) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: NodeListener) -> bool:
        try:
            self._listeners.remove(listener)
        except ValueError:
            return False
        return True

    def _notify(self, node: Node[S, A]) -> None:
        for listener in self._listeners:
            listener(node)
