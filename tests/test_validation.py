from and_or_search.config import SearchSettings
from and_or_search.plan import Plan
from and_or_search.search import search
from and_or_search.vacuum import LEFT, RIGHT, SUCK, VacuumState, VacuumWorldProblem
from and_or_search.validation import check_plan

DIRTY = VacuumState("A", True, True)


def test_engine_plan_passes_check():
    problem = VacuumWorldProblem("A")
    plan = search(problem, SearchSettings()).plan
    check = check_plan(plan, problem)
    assert check.ok is True
    assert check.errors == []

def test_leaf_that_is_not_goal_is_reported():
    check = check_plan(Plan(state=DIRTY), VacuumWorldProblem("A"))
    assert not check.ok
    assert "not a goal" in check.errors[0]

def test_unavailable_action_is_reported():
    plan = Plan(state=DIRTY, action=LEFT, children=(Plan(state=DIRTY),))
    check = check_plan(plan, VacuumWorldProblem("A"))
    assert not check.ok
    assert "not available" in check.errors[0]

def test_missing_outcome_branch_is_reported():
    plan = Plan(state=DIRTY, action=SUCK, children=(Plan(state=VacuumState("A", False, False)),))
    check = check_plan(plan, VacuumWorldProblem("A"))
    assert not check.ok
    assert "1 branch(es), expected 2" in check.errors[0]

def test_out_of_order_branches_are_reported():
    clean = Plan(state=VacuumState("A", False, False))
    right = Plan(
        state=VacuumState("A", False, True),
        action=RIGHT,
        children=(
            Plan(state=VacuumState("B", False, True), action=SUCK, children=(
                Plan(state=VacuumState("B", False, False)),
            )),
        ),
    )
    plan = Plan(state=DIRTY, action=SUCK, children=(right, clean))
    check = check_plan(plan, VacuumWorldProblem("A"))
    assert not check.ok
    assert any("branches on" in error for error in check.errors)
