"""Problem abstraction consumed by the search engine."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Generic, Optional, TypeVar

S = TypeVar("S")
A = TypeVar("A")

ActionsFn = Callable[[S], Iterable[A]]
ResultFn = Callable[[S, A], S]
GoalTest = Callable[[S], bool]
StepCostFn = Callable[[S, A, S], float]


def unit_step_cost(state: object, action: object, successor: object) -> float:
    return 1


class Problem(Generic[S, A]):
    """Bundle of the five functions that define a search problem.

    The callbacks must be pure: the engine calls them as often as it
    likes and in any order. When *step_cost* is omitted every step costs 1.
    *on_search_start* runs once at the start of every search, before the
    root is built; stateful action filters clear themselves there.
    """

    def __init__(
        self,
        initial_state: S,
        actions: ActionsFn,
        result: ResultFn,
        goal_test: GoalTest,
        step_cost: Optional[StepCostFn] = None,
        on_search_start: Optional[Callable[[], None]] = None,
    ) -> None:
        self.initial_state = initial_state
        self._actions = actions
        self._result = result
        self._goal_test = goal_test
        self._step_cost = step_cost or unit_step_cost
        self._on_search_start = on_search_start

    def start_search(self) -> None:
        if self._on_search_start is not None:
            self._on_search_start()

    def initial(self) -> S:
        return self.initial_state

    def actions(self, state: S) -> list[A]:
        return list(self._actions(state))

    def result(self, state: S, action: A) -> S:
        return self._result(state, action)

    def is_goal(self, state: S) -> bool:
        return self._goal_test(state)

    def step_cost(self, state: S, action: A, successor: S) -> float:
        return self._step_cost(state, action, successor)
