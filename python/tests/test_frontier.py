"""Priority frontier — ordering, tie-breaking and per-state deduplication."""

from __future__ import annotations

import pytest

from npuzzle.engine.search.frontier import PriorityFrontier, fingerprint_of
from npuzzle.models.board import Action, Board
from npuzzle.models.node import Node


def _by_cost(node: Node) -> float:
    return node.path_cost


def _node(state: object, cost: float = 0) -> Node:
    return Node(state=state, path_cost=cost)


def test_pops_lowest_priority_first() -> None:
    frontier = PriorityFrontier(_by_cost)
    for state, cost in (("a", 3), ("b", 1), ("c", 2)):
        frontier.push(_node(state, cost))
    assert [frontier.pop().state for _ in range(3)] == ["b", "c", "a"]


def test_ties_pop_in_insertion_order() -> None:
    frontier = PriorityFrontier(_by_cost)
    for state in "xyzw":
        frontier.push(_node(state, 5))
    assert [frontier.pop().state for _ in range(4)] == list("xyzw")


def test_duplicate_state_with_equal_priority_is_dropped() -> None:
    frontier = PriorityFrontier(_by_cost)
    first = _node("s", 2)
    assert frontier.push(first)
    assert not frontier.push(_node("s", 2))
    assert len(frontier) == 1
    assert frontier.lookup("s") is first


def test_duplicate_state_with_worse_priority_is_dropped() -> None:
    frontier = PriorityFrontier(_by_cost)
    frontier.push(_node("s", 2))
    assert not frontier.push(_node("s", 4))
    assert frontier.priority_of("s") == 2


def test_better_priority_replaces_entry() -> None:
    frontier = PriorityFrontier(_by_cost)
    frontier.push(_node("s", 5))
    frontier.push(_node("t", 3))
    better = _node("s", 1)
    assert frontier.push(better)

    assert len(frontier) == 2
    assert frontier.pop() is better
    assert frontier.pop().state == "t"
    assert not frontier


def test_contains_and_lookup() -> None:
    frontier = PriorityFrontier(_by_cost)
    frontier.push(_node("s"))
    assert "s" in frontier
    assert "t" not in frontier
    assert frontier.lookup("t") is None
    assert frontier.priority_of("t") is None


def test_pop_empty_raises() -> None:
    frontier = PriorityFrontier(_by_cost)
    with pytest.raises(IndexError):
        frontier.pop()

    frontier.push(_node("s", 2))
    frontier.push(_node("s", 1))
    frontier.pop()
    with pytest.raises(IndexError):
        frontier.pop()


def test_boards_deduplicate_on_grid_not_path_cost() -> None:
    board = Board.solved(3)
    back = board.apply(Action.UP).apply(Action.DOWN)
    assert back == board and back.path_cost == 2

    frontier = PriorityFrontier(lambda n: n.depth)
    frontier.push(Node(state=board))
    assert back in frontier
    assert not frontier.push(Node(state=back, depth=2))


def test_fingerprint_of_falls_back_to_state() -> None:
    assert fingerprint_of("abc") == "abc"
    assert fingerprint_of(Board.solved(2)) == (1, 2, 3, 0)


def test_clear() -> None:
    frontier = PriorityFrontier(_by_cost)
    frontier.push(_node("s"))
    frontier.clear()
    assert len(frontier) == 0
    assert "s" not in frontier
