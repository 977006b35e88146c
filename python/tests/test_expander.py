"""Node expander — node factories, expansion counting and listeners."""

from __future__ import annotations

import pytest

from npuzzle.engine.puzzle.puzzle import Puzzle
from npuzzle.engine.search.expander import NodeExpander
from npuzzle.engine.search.problem import Problem
from npuzzle.models.board import Action, Board
from npuzzle.models.node import Node

PROB1 = [[1, 2, 3], [5, 0, 6], [4, 7, 8]]


def _problem() -> Problem:
    return Puzzle.from_matrix(PROB1).problem()


def test_root_node() -> None:
    expander = NodeExpander()
    root = expander.root("s0")
    assert root.parent is None
    assert root.action is None
    assert root.path_cost == 0
    assert root.depth == 0
    assert root.is_root


def test_child_accumulates_cost_and_depth() -> None:
    expander = NodeExpander()
    root = expander.root("s0")
    child = expander.child("s1", root, "go", 2.5)
    grandchild = expander.child("s2", child, "go", 1)
    assert child.parent is root
    assert grandchild.path_cost == 3.5
    assert grandchild.depth == 2
    assert [n.state for n in grandchild.path()] == ["s0", "s1", "s2"]


def test_child_without_parent_links() -> None:
    expander = NodeExpander(use_parent_links=False)
    root = expander.root("s0")
    child = expander.child("s1", root, "go", 1)
    assert child.parent is None
    assert child.action == "go"
    assert child.path_cost == 1
    assert not child.is_root


def test_expand_follows_action_order() -> None:
    expander = NodeExpander()
    root = expander.root(Board.from_matrix(PROB1))
    children = expander.expand(root, _problem())

    assert [c.action for c in children] == [Action.UP, Action.DOWN, Action.LEFT, Action.RIGHT]
    assert all(c.parent is root and c.path_cost == 1 for c in children)
    assert all(c.state.path_cost == 1 for c in children)
    assert expander.nodes_expanded == 1


def test_expand_uses_step_cost() -> None:
    problem = Problem(
        0,
        actions=lambda s: ["inc", "double"],
        result=lambda s, a: s + 1 if a == "inc" else s * 2,
        goal_test=lambda s: False,
        step_cost=lambda s, a, s2: 3 if a == "double" else 1,
    )
    expander = NodeExpander()
    children = expander.expand(expander.root(1), problem)
    assert [(c.state, c.path_cost) for c in children] == [(2, 1), (2, 3)]


def test_default_step_cost_is_one() -> None:
    problem = Problem(0, lambda s: [1], lambda s, a: s + a, lambda s: False)
    assert problem.step_cost(0, 1, 1) == 1
    assert problem.initial() == 0


def test_listeners_notified_in_order() -> None:
    expander = NodeExpander()
    calls: list[tuple[str, Node]] = []
    expander.add_listener(lambda n: calls.append(("first", n)))
    expander.add_listener(lambda n: calls.append(("second", n)))

    root = expander.root(Board.from_matrix(PROB1))
    expander.expand(root, _problem())
    assert calls == [("first", root), ("second", root)]


def test_remove_listener() -> None:
    expander = NodeExpander()
    seen: list[Node] = []
    expander.add_listener(seen.append)
    assert expander.remove_listener(seen.append)
    assert not expander.remove_listener(seen.append)

    expander.expand(expander.root(Board.from_matrix(PROB1)), _problem())
    assert seen == []


def test_listener_exception_propagates() -> None:
    expander = NodeExpander()

    def boom(node: Node) -> None:
        raise RuntimeError("listener failed")

    expander.add_listener(boom)
    with pytest.raises(RuntimeError, match="listener failed"):
        expander.expand(expander.root(Board.from_matrix(PROB1)), _problem())
    assert expander.nodes_expanded == 1


def test_reset_clears_counter() -> None:
    expander = NodeExpander()
    expander.expand(expander.root(Board.from_matrix(PROB1)), _problem())
    expander.reset()
    assert expander.nodes_expanded == 0
