# problem.py
# The contract every non-deterministic domain implements.
#
# The engine only ever calls actions(), results() and goal_test(). The
# deterministic hooks below exist so that code written against a
# deterministic problem surface fails loudly instead of silently picking
# one outcome.

from abc import ABC, abstractmethod
from typing import Any, Sequence

from and_or_search.errors import UnsupportedOperationError


class NonDeterministicProblem(ABC):
    """
    A search problem whose actions may each lead to several states.

    Subclasses supply the domain: which actions are available in a state,
    every state an action might produce, and which states are goals.

    Example:
        class Coin(NonDeterministicProblem):
            def actions(self, state):
                return ["flip"] if state == "start" else []

            def results(self, state, action):
                return ["heads", "tails"]

            def goal_test(self, state):
                return state in ("heads", "tails")

        Coin("start")
    """

    def __init__(self, initial_state: Any) -> None:
        self._initial_state = initial_state

    @property
    def initial_state(self) -> Any:
        return self._initial_state

    @abstractmethod
    def actions(self, state: Any) -> Sequence[Any]:
        """Actions available in `state`, in preference order. Empty means dead end."""

    @abstractmethod
    def results(self, state: Any, action: Any) -> Sequence[Any]:
        """Every distinct state `action` might produce from `state`. Never empty."""

    @abstractmethod
    def goal_test(self, state: Any) -> bool:
        """True iff `state` is a goal."""

    # ------------------------------------------------------------------
    # Deterministic-only operations
    # ------------------------------------------------------------------

    def result(self, state: Any, action: Any) -> Any:
        raise UnsupportedOperationError("result")

    def successors(self, state: Any) -> Sequence[tuple[Any, Any]]:
        raise UnsupportedOperationError("successors")

    def step_cost(self, from_state: Any, to_state: Any) -> float:
        raise UnsupportedOperationError("step_cost")

    def estimated_cost_to_goal(self, state: Any) -> float:
        raise UnsupportedOperationError("estimated_cost_to_goal")
