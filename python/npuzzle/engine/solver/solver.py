"""Runs a configured search on a board."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Optional

from npuzzle.config import SearchConfig
from npuzzle.engine.puzzle.heuristics import heuristic_by_name
from npuzzle.engine.puzzle.puzzle import Puzzle, is_solvable
from npuzzle.engine.search.driver import CancelToken, SearchResult, search
from npuzzle.engine.search.expander import NodeListener
from npuzzle.engine.search.strategies import create_strategy, get_strategy_class
from npuzzle.errors import InvalidInput
from npuzzle.models.board import Board

logger = logging.getLogger(__name__)


class Solver:
    """Stateless solver — all methods are static."""

    @staticmethod
    def solve(
        board: Board,
        config: Optional[SearchConfig] = None,
        cancel: Optional[CancelToken] = None,
        listeners: Iterable[NodeListener] = (),
    ) -> SearchResult:
        """Search for a plan that solves *board* under *config* (A*/Manhattan by default)."""
        config = config or SearchConfig()
        heuristic = None
        if get_strategy_class(config.algorithm).informed:
            if config.heuristic is None:
                raise InvalidInput(f"Strategy '{config.algorithm}' needs a heuristic.")
            heuristic = heuristic_by_name(config.heuristic, config.include_blank)
        strategy = create_strategy(config.algorithm, heuristic)

        if not is_solvable(board):
            logger.warning("Board %s is not solvable; the search will exhaust", board.fingerprint())

        puzzle = Puzzle(board)
        return search(
            puzzle.problem(prune=config.prune),
            strategy,
            track_parents=config.track_parents,
            listeners=listeners,
            discipline=config.discipline,
            cancel=cancel,
        )


solve = Solver.solve
