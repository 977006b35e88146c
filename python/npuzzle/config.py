"""Reference problems and per-run search configuration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from npuzzle.errors import InvalidInput

# Named instances shipped with the original menu program.
PROBLEMS: dict[str, tuple[tuple[int, ...], ...]] = {
    "prob1": ((1, 2, 3), (5, 0, 6), (4, 7, 8)),
    "prob2": ((1, 3, 6), (5, 2, 0), (4, 7, 8)),
    "prob3": ((1, 6, 2), (5, 7, 3), (0, 4, 8)),
    "prob4": ((5, 1, 3, 4), (2, 0, 7, 8), (10, 6, 11, 12), (9, 13, 14, 15)),
}

DEFAULT_PROBLEM = "prob1"

# Menu numbering used by the interactive CLI.
ALGORITHM_CHOICES: dict[str, str] = {
    "1": "bfs",
    "2": "greedy",
    "3": "astar",
}
EXIT_CHOICE = "4"


@dataclass
class SearchConfig:
    """
    Everything needed to run one search.

    Attributes:
        algorithm: Registered strategy name ("bfs", "greedy", "astar")
        heuristic: Heuristic name for informed strategies
        discipline: "graph" or "tree"
        track_parents: Keep parent links so the plan can be rebuilt
        include_blank: Let the heuristics charge a misplaced blank
    """
    algorithm: str = "astar"
    heuristic: Optional[str] = "manhattan"
    discipline: str = "graph"
    track_parents: bool = True
    include_blank: bool = False

    @classmethod
    def reference(cls, algorithm: str, heuristic: Optional[str] = None) -> SearchConfig:
        """Tree search with best-cost pruning and blank-counting heuristics."""
        return cls(
            algorithm=algorithm,
            heuristic=heuristic,
            discipline="tree",
            include_blank=True,
        )

    @property
    def prune(self) -> bool:
        return self.discipline == "tree"


def parse_grid(text: str) -> list[list[int]]:
    """Parse ``"1,2,3;5,0,6;4,7,8"`` (rows split by ``;`` or ``/``) into a matrix."""
    rows = [r for r in text.replace("/", ";").split(";") if r.strip()]
    if not rows:
        raise InvalidInput("Empty grid.")
    try:
        return [[int(v) for v in row.replace(",", " ").split()] for row in rows]
    except ValueError as e:
        raise InvalidInput(f"Grid values must be integers: {text!r}") from e


def problem_matrix(name: str) -> list[list[int]]:
    try:
        return [list(row) for row in PROBLEMS[name]]
    except KeyError:
        available = ", ".join(PROBLEMS)
        raise InvalidInput(f"Unknown problem: {name}. Available: {available}") from None
