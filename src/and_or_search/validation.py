# validation.py
# Re-checks a finished plan against the problem it claims to solve.

from pydantic import BaseModel, Field

from and_or_search.plan import Plan
from and_or_search.problem import NonDeterministicProblem


class PlanCheck(BaseModel):
    ok: bool
    errors: list[str] = Field(default_factory=list)


def check_plan(plan: Plan, problem: NonDeterministicProblem) -> PlanCheck:
    """
    Walk the plan and confirm it covers the problem.

    Every leaf must be a goal, every action must be one the problem offers
    in that state, and every node's children must match results() in count
    and order.
    """
    errors: list[str] = []
    for node in plan.walk():
        if node.is_leaf and node.action is None:
            if not problem.goal_test(node.state):
                errors.append(f"Leaf {node.state!r} is not a goal state")
            continue

        if node.action not in list(problem.actions(node.state)):
            errors.append(f"Action {node.action!r} is not available in {node.state!r}")
            continue

        expected = list(problem.results(node.state, node.action))
        actual = [child.state for child in node.children]
        if len(actual) != len(expected):
            errors.append(
                f"{node.action!r} from {node.state!r} has {len(actual)} branch(es), "
                f"expected {len(expected)}"
            )
        elif actual != expected:
            errors.append(
                f"{node.action!r} from {node.state!r} branches on {actual!r}, "
                f"expected {expected!r}"
            )
    return PlanCheck(ok=not errors, errors=errors)
