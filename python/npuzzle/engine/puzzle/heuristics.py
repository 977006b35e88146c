"""Admissible distance estimates for the N-puzzle.

Both heuristics compare a board against the solved layout. By default
the blank is ignored, which keeps them admissible for unit step cost.
``include_blank=True`` also charges the blank when it is out of place;
that variant counts tiles the way the original menu program did but
can overestimate by one move.
"""

from __future__ import annotations

from collections.abc import Callable
from functools import partial

from npuzzle.errors import InvalidInput
from npuzzle.models.board import Board, goal_position

BoardHeuristic = Callable[[Board], float]


def misplaced_tiles(board: Board, include_blank: bool = False) -> int:
    """Number of cells whose tile differs from the solved board."""
    count = 0
    for r, row in enumerate(board.tiles):
        for c, value in enumerate(row):
            if value == 0 and not include_blank:
                continue
            if goal_position(value, board.size) != (r, c):
                count += 1
    return count


def manhattan_distance(board: Board, include_blank: bool = False) -> int:
    """Sum over misplaced tiles of the grid distance to their goal cell."""
    total = 0
    for r, row in enumerate(board.tiles):
        for c, value in enumerate(row):
            if value == 0 and not include_blank:
                continue
            gr, gc = goal_position(value, board.size)
            total += abs(r - gr) + abs(c - gc)
    return total


HEURISTICS: dict[str, Callable[..., int]] = {
    "misplaced": misplaced_tiles,
    "manhattan": manhattan_distance,
}

# Menu numbering used by the interactive CLI.
MENU_CHOICES: dict[str, str] = {
    "1": "misplaced",
    "2": "manhattan",
}


def heuristic_by_name(name: str, include_blank: bool = False) -> BoardHeuristic:
    """Return the heuristic registered as *name* (``misplaced`` or ``manhattan``)."""
    name = MENU_CHOICES.get(name, name)
    try:
        fn = HEURISTICS[name]
    except KeyError:
        available = ", ".join(HEURISTICS)
        raise InvalidInput(f"Unknown heuristic: {name}. Available: {available}") from None
    if not include_blank:
        return fn
    h = partial(fn, include_blank=True)
    h.__name__ = f"{fn.__name__}_with_blank"  # type: ignore[attr-defined]
    return h
