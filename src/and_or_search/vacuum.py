# vacuum.py
# The erratic two-square vacuum world.
#
# The agent is in square A or B, each square is dirty or clean. Suck is
# unreliable: on a dirty square it sometimes cleans the neighbour too, on a
# clean square it sometimes deposits dirt. Left and Right always work.

from typing import NamedTuple

from and_or_search.problem import NonDeterministicProblem

SUCK = "Suck"
LEFT = "Left"
RIGHT = "Right"

A = "A"
B = "B"


class VacuumState(NamedTuple):
    location: str
    dirty_a: bool
    dirty_b: bool


class VacuumWorldProblem(NonDeterministicProblem):
    """Both squares start dirty; the goal is both squares clean."""

    def __init__(self, initial_location: str = A) -> None:
        if initial_location not in (A, B):
            raise ValueError(f"{initial_location!r} is not a vacuum world location")
        super().__init__(VacuumState(initial_location, True, True))

    def actions(self, state: VacuumState) -> list[str]:
        if state.location == A:
            return [SUCK, RIGHT]
        if state.location == B:
            return [LEFT, SUCK]
        raise ValueError(f"{state!r} is not a valid vacuum world state")

    def results(self, state: VacuumState, action: str) -> list[VacuumState]:
        location, dirty_a, dirty_b = state
        if action == LEFT:
            return [VacuumState(A, dirty_a, dirty_b)]
        if action == RIGHT:
            return [VacuumState(B, dirty_a, dirty_b)]

        if action == SUCK and location == A:
            if dirty_a and dirty_b:
                return [VacuumState(A, False, False), VacuumState(A, False, True)]
            if dirty_a:
                return [VacuumState(A, False, False)]
            return [VacuumState(A, False, dirty_b), VacuumState(A, True, dirty_b)]

        if action == SUCK and location == B:
            if dirty_a and dirty_b:
                return [VacuumState(B, False, False), VacuumState(B, True, False)]
            if dirty_b:
                return [VacuumState(B, False, False)]
            # Dirt deposited is listed first on this side.
            return [VacuumState(B, dirty_a, True), VacuumState(B, dirty_a, False)]

        raise ValueError(f"Either invalid action {action!r} or invalid state {state!r}")

    def goal_test(self, state: VacuumState) -> bool:
        return not state.dirty_a and not state.dirty_b
