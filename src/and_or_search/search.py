# search.py
# And-Or graph search over a non-deterministic problem.
#
# Two mutually recursive phases:
#   OR   pick one action whose every outcome can be handled
#   AND  handle every outcome of the chosen action
#
# A state already on the current choice path is a cycle and fails that
# branch; that is the termination guarantee on cyclic state graphs. The
# engine keeps nothing between calls.
#
# All terminal output is delegated to display.py.

from typing import Any, Iterator, Sequence

from and_or_search import display
from and_or_search.config import SearchSettings
from and_or_search.errors import ContractViolationError
from and_or_search.plan import Plan, PlanBuilder
from and_or_search.problem import NonDeterministicProblem
from and_or_search.result import Failure, SearchResult, Success


# ---------------------------------------------------------------------------
# SearchPath
# ---------------------------------------------------------------------------


class SearchPath:
    """
    Immutable chain of states chosen on the current OR branch, newest first.

    extend() returns a new path and leaves this one untouched, so sibling
    outcomes of one AND node all see the same ancestors. With hashed=True
    membership goes through a frozenset instead of an equality scan; once an
    unhashable state shows up the path drops the index and scans.
    """

    __slots__ = ("_states", "_index")

    def __init__(self, hashed: bool = False) -> None:
        self._states: tuple[Any, ...] = ()
        self._index: frozenset | None = frozenset() if hashed else None

    def extend(self, state: Any) -> "SearchPath":
        path = SearchPath.__new__(SearchPath)
        path._states = (state,) + self._states
        path._index = None
        if self._index is not None:
            try:
                path._index = self._index | {state}
            except TypeError:
                path._index = None
        return path

    def __contains__(self, state: Any) -> bool:
        if self._index is not None:
            try:
                return state in self._index
            except TypeError:
                pass
        return any(visited == state for visited in self._states)

    def __len__(self) -> int:
        return len(self._states)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._states)


# ---------------------------------------------------------------------------
# AndOrGraphSearch
# ---------------------------------------------------------------------------


class AndOrGraphSearch:
    """
    Finds a conditional plan for a non-deterministic problem.

    Example:
        result = AndOrGraphSearch().search(VacuumWorldProblem("A"))
        match result:
            case Success(plan=plan):
                print(plan)
            case Failure():
                print("no plan")
    """

    def __init__(self, settings: SearchSettings | None = None) -> None:
        self._settings = settings if settings is not None else SearchSettings.from_env()

    @property
    def settings(self) -> SearchSettings:
        return self._settings

    def search(self, problem: NonDeterministicProblem) -> SearchResult:
        """
        Search from the problem's initial state.

        Returns Success or Failure. Raises ContractViolationError if the
        problem offers an action with no outcomes.
        """
        trace = self._settings.trace
        if trace:
            display.search_start(problem)

        path = SearchPath(hashed=self._settings.path_index == "hashed")
        result = self._or_search(problem.initial_state, problem, path)

        if trace:
            display.search_complete(result)
        return result

    # ------------------------------------------------------------------
    # OR phase
    # ------------------------------------------------------------------

    def _or_search(
        self, state: Any, problem: NonDeterministicProblem, path: SearchPath
    ) -> SearchResult:
        trace = self._settings.trace
        depth = len(path)

        if problem.goal_test(state):
            if trace:
                display.goal_reached(state, depth)
            return Success(plan=Plan(state=state))

        if state in path:
            if trace:
                display.cycle_detected(state, depth)
            return Failure()

        if trace:
            display.or_node(state, depth)

        extended = path.extend(state)
        for action in problem.actions(state):
            result = self._and_search(
                problem.results(state, action), problem, extended, state, action
            )
            if isinstance(result, Success):
                return result

        if trace:
            display.dead_end(state, depth)
        return Failure()

    # ------------------------------------------------------------------
    # AND phase
    # ------------------------------------------------------------------

    def _and_search(
        self,
        states: Sequence[Any],
        problem: NonDeterministicProblem,
        path: SearchPath,
        origin_state: Any,
        origin_action: Any,
    ) -> SearchResult:
        outcomes = list(states)
        if not outcomes:
            raise ContractViolationError(origin_state, origin_action)

        trace = self._settings.trace
        if trace:
            display.and_node(origin_state, origin_action, outcomes, len(path))

        builder = PlanBuilder(origin_state, origin_action)
        for outcome in outcomes:
            result = self._or_search(outcome, problem, path)
            if isinstance(result, Failure):
                if trace:
                    display.outcome_failed(origin_state, origin_action, outcome, len(path))
                return result
            builder.add_child(result.plan)

        return Success(plan=builder.build())


def search(
    problem: NonDeterministicProblem, settings: SearchSettings | None = None
) -> SearchResult:
    """Run a fresh And-Or graph search on `problem`."""
    return AndOrGraphSearch(settings).search(problem)
