"""
N-Puzzle solver - best-first search over sliding-tile boards.

Usage:
    from npuzzle import Puzzle, create_strategy, manhattan_distance, search

    puzzle = Puzzle.from_matrix([[1, 2, 3], [5, 0, 6], [4, 7, 8]])
    result = search(puzzle.problem(), create_strategy("astar", manhattan_distance))
    print(result.actions, dict(result.metrics))
"""

from npuzzle.config import SearchConfig
from npuzzle.engine.generator import GameGenerator
from npuzzle.engine.puzzle import (
    BestCostTable,
    Puzzle,
    heuristic_by_name,
    is_solvable,
    manhattan_distance,
    misplaced_tiles,
)
from npuzzle.engine.search import (
    CancelToken,
    Discipline,
    Problem,
    SearchResult,
    Termination,
    create_strategy,
    search,
)
from npuzzle.errors import IllegalMove, InvalidInput, NoPathAvailable, NPuzzleError
from npuzzle.models import Action, Board, Metrics, Node
from npuzzle.engine.solver import Solver, solve

__all__ = [
    "Action",
    "BestCostTable",
    "Board",
    "CancelToken",
    "Discipline",
    "GameGenerator",
    "IllegalMove",
    "InvalidInput",
    "Metrics",
    "NPuzzleError",
    "Node",
    "NoPathAvailable",
    "Problem",
    "Puzzle",
    "SearchConfig",
    "SearchResult",
    "Solver",
    "Termination",
    "create_strategy",
    "heuristic_by_name",
    "is_solvable",
    "manhattan_distance",
    "misplaced_tiles",
    "search",
    "solve",
]
