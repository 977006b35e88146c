"""Adapts the board model to the generic search :class:`Problem`.

A :class:`Puzzle` holds one run's configuration (the initial board) and,
for the tree-search variant, a :class:`BestCostTable` that stops the
adaptor from offering a move whose result has already been reached at
an equal or lower path cost.
"""

from __future__ import annotations

import logging

from npuzzle.engine.search.problem import Problem
from npuzzle.models.board import Action, Board

logger = logging.getLogger(__name__)


# -- pure problem functions ---------------------------------------------------


def actions(board: Board) -> list[Action]:
    return board.legal_actions()


def result(board: Board, action: Action) -> Board:
    return board.apply(action)


def is_goal(board: Board) -> bool:
    return board.is_goal()


def is_solvable(board: Board) -> bool:
    """Return True if *board* can reach the solved layout.

    Odd widths need an even inversion count. Even widths need the
    inversion count plus the blank's row (counted from the bottom,
    starting at 0) to be even.
    """
    n = board.size
    flat = [v for row in board.tiles for v in row if v != 0]
    inversions = 0
    for i in range(len(flat)):
        for j in range(i + 1, len(flat)):
            if flat[i] > flat[j]:
                inversions += 1
    if n % 2 == 1:
        return inversions % 2 == 0
    blank_row_from_bottom = n - 1 - board.blank_pos[0]
    return (inversions + blank_row_from_bottom) % 2 == 0


# -- best-cost pruning --------------------------------------------------------


class BestCostTable:
    """Lowest path cost seen so far for each board fingerprint."""

    def __init__(self) -> None:
        self._best: dict[tuple[int, ...], int] = {}

    def __len__(self) -> int:
        return len(self._best)

    def get(self, board: Board) -> int | None:
        return self._best.get(board.fingerprint())

    def improves(self, board: Board) -> bool:
        """Record *board* if its path cost beats the best seen; report whether it did."""
        key = board.fingerprint()
        best = self._best.get(key)
        if best is not None and best <= board.path_cost:
            return False
        self._best[key] = board.path_cost
        return True

    def reset(self) -> None:
        self._best.clear()


# -- puzzle -------------------------------------------------------------------


class Puzzle:
    """One puzzle run: an initial board plus its pruning table."""

    def __init__(self, initial: Board) -> None:
        self.initial = initial
        self.best_costs = BestCostTable()

    @classmethod
    def from_matrix(cls, matrix: list[list[int]]) -> Puzzle:
        return cls(Board.from_matrix(matrix))

    def pruned_actions(self, board: Board) -> list[Action]:
        """Legal actions whose successor improves on the best cost recorded for it."""
        kept: list[Action] = []
        for action in board.legal_actions():
            if self.best_costs.improves(board.apply(action)):
                kept.append(action)
        return kept

    def problem(self, prune: bool = False) -> Problem[Board, Action]:
        """Build the search problem for this puzzle.

        With ``prune=True`` the actions function consults (and updates) the
        best-cost table, which is cleared at the start of every search.
        This is the variant meant for :class:`~npuzzle.engine.search.driver.TreeSearch`.
        """
        if prune:
            logger.debug("Best-cost pruning enabled for %s", self.initial.fingerprint())
            return Problem(
                self.initial,
                self.pruned_actions,
                result,
                is_goal,
                on_search_start=self.best_costs.reset,
            )
        return Problem(self.initial, actions, result, is_goal)
