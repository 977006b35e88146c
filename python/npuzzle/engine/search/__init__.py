"""Generic best-first search over an arbitrary state space."""

from npuzzle.engine.search.driver import (
    BestFirstSearch,
    CancelToken,
    Discipline,
    GraphSearch,
    QueueSearch,
    SearchResult,
    Termination,
    TreeSearch,
    actions_to,
    build_search,
    search,
)
from npuzzle.engine.search.expander import NodeExpander
from npuzzle.engine.search.frontier import PriorityFrontier, fingerprint_of
from npuzzle.engine.search.problem import Problem
from npuzzle.engine.search.strategies import (
    AStar,
    BreadthFirst,
    GreedyBestFirst,
    Strategy,
    create_strategy,
    get_strategy_class,
    register_strategy,
)

__all__ = [
    "AStar",
    "BestFirstSearch",
    "BreadthFirst",
    "CancelToken",
    "Discipline",
    "GraphSearch",
    "GreedyBestFirst",
    "NodeExpander",
    "PriorityFrontier",
    "Problem",
    "QueueSearch",
    "SearchResult",
    "Strategy",
    "Termination",
    "TreeSearch",
    "actions_to",
    "build_search",
    "create_strategy",
    "fingerprint_of",
    "get_strategy_class",
    "register_strategy",
    "search",
]
