from npuzzle.engine.puzzle.heuristics import (
    HEURISTICS,
    heuristic_by_name,
    manhattan_distance,
    misplaced_tiles,
)
from npuzzle.engine.puzzle.puzzle import BestCostTable, Puzzle, is_solvable

__all__ = [
    "HEURISTICS",
    "BestCostTable",
    "Puzzle",
    "heuristic_by_name",
    "is_solvable",
    "manhattan_distance",
    "misplaced_tiles",
]
