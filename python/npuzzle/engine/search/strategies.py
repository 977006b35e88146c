"""
Strategy Module - Evaluation functions that order the frontier.

Strategies register themselves by name so the CLI and configuration can
build one from a string:

    strategy = create_strategy("astar", heuristic=manhattan)
    frontier = PriorityFrontier(strategy.evaluate)
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any, Optional, cast

from npuzzle.errors import InvalidInput
from npuzzle.models.node import Node

Heuristic = Callable[[Any], float]


class Strategy(ABC):
    """
    Abstract base class for frontier orderings.

    Attributes:
        name: Short identifier used by the registry and the CLI
        description: Human-readable label for menus and reports
        informed: True when the strategy needs a heuristic
    """
    name: str = "base"
    description: str = "Base strategy"
    informed: bool = False

    def __init__(self, heuristic: Optional[Heuristic] = None) -> None:
        if self.informed and heuristic is None:
            raise InvalidInput(f"Strategy '{self.name}' needs a heuristic.")
        self.heuristic = heuristic

    @abstractmethod
    def evaluate(self, node: Node) -> float:
        """Priority of *node*; lower values are expanded first."""

    def __repr__(self) -> str:
        h = getattr(self.heuristic, "__name__", None)
        return f"{type(self).__name__}(heuristic={h})"


# Global registry of strategies
_STRATEGIES: dict[str, type[Strategy]] = {}


def register_strategy(cls: type[Strategy]) -> type[Strategy]:
    """Decorator that adds *cls* to the registry under ``cls.name``."""
    _STRATEGIES[cls.name] = cls
    return cls


@register_strategy
class BreadthFirst(Strategy):
    """Shallowest node first; ties resolve in insertion order, giving FIFO."""
    name = "bfs"
    description = "Breadth-First Search"

    def evaluate(self, node: Node) -> float:
        return node.depth


@register_strategy
class GreedyBestFirst(Strategy):
    """Node whose state looks closest to the goal first: f(n) = h(n)."""
    name = "greedy"
    description = "Greedy Best-First Search"
    informed = True

    def evaluate(self, node: Node) -> float:
        return cast(Heuristic, self.heuristic)(node.state)


@register_strategy
class AStar(Strategy):
    """f(n) = g(n) + h(n)."""
    name = "astar"
    description = "A* Search"
    informed = True

    def evaluate(self, node: Node) -> float:
        return node.path_cost + cast(Heuristic, self.heuristic)(node.state)


def create_strategy(name: str, heuristic: Optional[Heuristic] = None) -> Strategy:
    """
    Create a strategy instance by name.

    Args:
        name: Strategy name ("bfs", "greedy" or "astar")
        heuristic: h(state) for informed strategies; ignored by BFS

    Raises:
        InvalidInput: If the name is unknown or a heuristic is missing
    """
    if name not in _STRATEGIES:
        available = ", ".join(_STRATEGIES)
        raise InvalidInput(f"Unknown strategy: {name}. Available: {available}")
    cls = _STRATEGIES[name]
    return cls(heuristic if cls.informed else None)


def get_strategy_class(name: str) -> type[Strategy]:
    if name not in _STRATEGIES:
        raise InvalidInput(f"Unknown strategy: {name}")
    return _STRATEGIES[name]
