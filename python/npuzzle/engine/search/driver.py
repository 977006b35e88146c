"""Best-first search driver.

:class:`GraphSearch` keeps an explored set and never expands a state
twice. :class:`TreeSearch` keeps none and relies on the frontier (and,
for the puzzle, on the adaptor's best-cost pruning) to stay finite.
Both share the loop in :class:`QueueSearch`.
"""

from __future__ import annotations

import logging
import threading
from abc import ABC, abstractmethod
from collections.abc import Hashable, Iterable
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any, Optional, cast

from npuzzle.engine.search.expander import NodeExpander, NodeListener
from npuzzle.engine.search.frontier import Fingerprint, PriorityFrontier, fingerprint_of
from npuzzle.engine.search.problem import Problem
from npuzzle.engine.search.strategies import Strategy
from npuzzle.errors import InvalidInput, NoPathAvailable
from npuzzle.models import metrics as m
from npuzzle.models.metrics import Metrics
from npuzzle.models.node import Node

logger = logging.getLogger(__name__)


class Termination(StrEnum):
    SOLVED = "solved"
    EXHAUSTED = "exhausted"
    CANCELLED = "cancelled"


class Discipline(StrEnum):
    GRAPH = "graph"
    TREE = "tree"


class CancelToken:
    """Cooperative cancellation flag, checked once per search iteration."""

    def __init__(self) -> None:
        self._event = threading.Event()

    def cancel(self) -> None:
        self._event.set()

    def is_cancelled(self) -> bool:
        return self._event.is_set()


# -- queue search -------------------------------------------------------------


class QueueSearch(ABC):
    """Pops the best node, goal-tests it, expands it, offers its children.

    The root is goal-tested before anything is expanded, so a problem whose
    initial state is already a goal finishes with ``nodesExpanded = 0``.
    Metrics are republished when the loop ends for any reason, including
    an exception raised by a problem callback, heuristic or listener.
    """

    def __init__(self, expander: Optional[NodeExpander] = None) -> None:
        self.expander = expander or NodeExpander()
        self.metrics = Metrics()
        self.termination: Optional[Termination] = None
        self._max_queue_size = 0

    def find_node(
        self,
        problem: Problem,
        frontier: PriorityFrontier,
        cancel: Optional[CancelToken] = None,
    ) -> Optional[Node]:
        """Run the search; return the goal node or ``None``."""
        self._reset()
        problem.start_search()
        goal: Optional[Node] = None
        try:
            frontier.push(self.expander.root(problem.initial()))
            self._track_queue(frontier)

            while frontier:
                if cancel is not None and cancel.is_cancelled():
                    logger.info(
                        "Search cancelled after %d expansions",
                        self.expander.nodes_expanded,
                    )
                    self.termination = Termination.CANCELLED
                    return None

                node = frontier.pop()
                if problem.is_goal(node.state):
                    goal = node
                    self.termination = Termination.SOLVED
                    return node

                self._mark_expanded(node)
                for child in self.expander.expand(node, problem):
                    self._offer(child, frontier)
                self._track_queue(frontier)

            self.termination = Termination.EXHAUSTED
            return None
        finally:
            self._publish(frontier, goal)

    # -- hooks ----------------------------------------------------------------

    @abstractmethod
    def _mark_expanded(self, node: Node) -> None:
        ...

    @abstractmethod
    def _offer(self, child: Node, frontier: PriorityFrontier) -> None:
        ...

    def _reset(self) -> None:
        self.expander.reset()
        self.metrics.clear()
        self.termination = None
        self._max_queue_size = 0

    # -- metrics --------------------------------------------------------------

    def _track_queue(self, frontier: PriorityFrontier) -> None:
        self._max_queue_size = max(self._max_queue_size, len(frontier))

    def _publish(self, frontier: PriorityFrontier, goal: Optional[Node]) -> None:
        self.metrics.set(m.NODES_EXPANDED, self.expander.nodes_expanded)
        self.metrics.set(m.QUEUE_SIZE, len(frontier))
        self.metrics.set(m.MAX_QUEUE_SIZE, self._max_queue_size)
        self.metrics.set(m.PATH_COST, goal.path_cost if goal is not None else 0)


class GraphSearch(QueueSearch):
    """Queue search that refuses to re-expand a state."""

    def __init__(
        self,
        expander: Optional[NodeExpander] = None,
        fingerprint: Fingerprint = fingerprint_of,
    ) -> None:
        super().__init__(expander)
        self._fingerprint = fingerprint
        self.explored: set[Hashable] = set()

    def _reset(self) -> None:
        super()._reset()
        self.explored = set()

    def _mark_expanded(self, node: Node) -> None:
        self.explored.add(self._fingerprint(node.state))

    def _offer(self, child: Node, frontier: PriorityFrontier) -> None:
        if self._fingerprint(child.state) in self.explored:
            return
        frontier.push(child)


class TreeSearch(QueueSearch):
    """Queue search without an explored set."""

    def _mark_expanded(self, node: Node) -> None:
        pass

    def _offer(self, child: Node, frontier: PriorityFrontier) -> None:
        frontier.push(child)


# -- action reconstruction ----------------------------------------------------


def actions_to(node: Node) -> list[Any]:
    """Actions that lead from the root to *node*, in execution order.

    Raises :class:`NoPathAvailable` if the chain of parent links is broken,
    i.e. the node was created with parent-link tracking disabled.
    """
    actions: list[Any] = []
    current: Optional[Node] = node
    while current is not None and not current.is_root:
        if current.parent is None:
            raise NoPathAvailable(
                "Parent links were not kept; the action sequence cannot be rebuilt."
            )
        actions.append(current.action)
        current = current.parent
    actions.reverse()
    return actions


# -- search for actions -------------------------------------------------------


class BestFirstSearch:
    """A :class:`QueueSearch` paired with a frontier ordering."""

    def __init__(self, impl: QueueSearch, strategy: Strategy) -> None:
        self.impl = impl
        self.strategy = strategy

    @property
    def metrics(self) -> Metrics:
        return self.impl.metrics

    @property
    def termination(self) -> Optional[Termination]:
        return self.impl.termination

    def find_node(self, problem: Problem, cancel: Optional[CancelToken] = None) -> Optional[Node]:
        frontier = PriorityFrontier(self.strategy.evaluate)
        return self.impl.find_node(problem, frontier, cancel)

    def find_actions(self, problem: Problem, cancel: Optional[CancelToken] = None) -> Optional[list[Any]]:
        """Return the action plan, or ``None`` if no goal was reached."""
        node = self.find_node(problem, cancel)
        return actions_to(node) if node is not None else None


@dataclass
class SearchResult:
    """
    Outcome of :func:`search`.

    Attributes:
        actions: Plan from the initial state to the goal; empty when unsolved
        metrics: Published search statistics
        termination: Why the search stopped
        goal: Goal node, when one was reached
    """
    actions: list[Any] = field(default_factory=list)
    metrics: Metrics = field(default_factory=Metrics)
    termination: Termination = Termination.EXHAUSTED
    goal: Optional[Node] = None

    @property
    def solved(self) -> bool:
        return self.termination is Termination.SOLVED

    @property
    def path_cost(self) -> float:
        return self.metrics.get_float(m.PATH_COST)

    @property
    def nodes_expanded(self) -> int:
        return self.metrics.get_int(m.NODES_EXPANDED)


def build_search(
    strategy: Strategy,
    *,
    track_parents: bool = True,
    listeners: Iterable[NodeListener] = (),
    discipline: Discipline | str = Discipline.GRAPH,
) -> BestFirstSearch:
    """Assemble expander, queue search and strategy into one search object."""
    try:
        discipline = Discipline(discipline)
    except ValueError:
        raise InvalidInput(f"Unknown search discipline: {discipline}") from None

    expander = NodeExpander(use_parent_links=track_parents)
    for listener in listeners:
        expander.add_listener(listener)
    impl: QueueSearch = GraphSearch(expander) if discipline is Discipline.GRAPH else TreeSearch(expander)
    return BestFirstSearch(impl, strategy)


def search(
    problem: Problem,
    strategy: Strategy,
    *,
    track_parents: bool = True,
    listeners: Iterable[NodeListener] = (),
    discipline: Discipline | str = Discipline.GRAPH,
    cancel: Optional[CancelToken] = None,
) -> SearchResult:
    """Run *strategy* over *problem* and return the plan with its metrics."""
    runner = build_search(
        strategy,
        track_parents=track_parents,
        listeners=listeners,
        discipline=discipline,
    )
    logger.debug("Starting %s %s search", runner.impl.__class__.__name__, strategy.name)
    goal = runner.find_node(problem, cancel)
    termination = cast(Termination, runner.termination)

    logger.info(
        "%s search %s: %s",
        strategy.name,
        termination.value,
        ", ".join(f"{k}={v}" for k, v in runner.metrics.items()),
    )
    return SearchResult(
        actions=actions_to(goal) if goal is not None else [],
        metrics=runner.metrics,
        termination=termination,
        goal=goal,
    )
