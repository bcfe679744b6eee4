import pytest
from pydantic import ValidationError

from and_or_search.plan import NO_OP, Plan, PlanBuilder, format_plan
from and_or_search.vacuum import VacuumState

# ---------------------------------------------------------------------------
# Node invariants
# ---------------------------------------------------------------------------

def test_goal_leaf_has_no_action_and_no_children():
    leaf = Plan(state="goal")
    assert leaf.action is None
    assert leaf.children == ()
    assert leaf.is_leaf is True

def test_node_without_action_cannot_have_children():
    child = Plan(state="goal")
    with pytest.raises(ValidationError, match="must be a leaf"):
        Plan(state="start", action=None, children=(child,))

def test_plan_is_frozen_after_construction():
    plan = Plan(state="start", action="go", children=(Plan(state="goal"),))
    with pytest.raises(ValidationError):
        plan.action = "stay"

def test_plans_compare_structurally():
    first = Plan(state=1, action="inc", children=(Plan(state=2),))
    second = Plan(state=1, action="inc", children=(Plan(state=2),))
    assert first == second
    assert first != Plan(state=1, action="inc", children=(Plan(state=3),))

# ---------------------------------------------------------------------------
# Builder
# ---------------------------------------------------------------------------

def test_builder_keeps_outcome_order():
    builder = PlanBuilder("s", "act")
    builder.add_child(Plan(state="x"))
    builder.add_child(Plan(state="y"))
    plan = builder.build()
    assert [child.state for child in plan.children] == ["x", "y"]
    assert isinstance(plan.children, tuple)

def test_builder_rejects_changes_after_build():
    builder = PlanBuilder("s", "act")
    builder.add_child(Plan(state="x"))
    builder.build()
    with pytest.raises(RuntimeError):
        builder.add_child(Plan(state="y"))
    with pytest.raises(RuntimeError):
        builder.build()

# ---------------------------------------------------------------------------
# Traversal
# ---------------------------------------------------------------------------

def _branching_plan() -> Plan:
    right_branch = Plan(
        state="b", action="Right", children=(
            Plan(state="c", action="Suck", children=(Plan(state="d"),)),
        ),
    )
    return Plan(state="a", action="Suck", children=(Plan(state="goal"), right_branch))

def test_walk_is_pre_order():
    states = [node.state for node in _branching_plan().walk()]
    assert states == ["a", "goal", "b", "c", "d"]

def test_leaves_depth_and_size():
    plan = _branching_plan()
    assert [leaf.state for leaf in plan.leaves()] == ["goal", "d"]
    assert plan.depth() == 3
    assert plan.size() == 5
    assert Plan(state="only").depth() == 0

# ---------------------------------------------------------------------------
# Text rendering
# ---------------------------------------------------------------------------

def test_format_leaf_is_noop():
    assert format_plan(Plan(state="goal")) == NO_OP

def test_format_single_child_continues_inline():
    plan = Plan(state=1, action="Right", children=(
        Plan(state=2, action="Suck", children=(Plan(state=3),)),
    ))
    assert format_plan(plan) == "Right Suck NoOp"

def test_format_multiple_children_branch_with_if_then_else():
    assert str(_branching_plan()) == (
        "Suck IF goal THEN [NoOp] ELSE IF b THEN [Right Suck NoOp]"
    )

def test_format_uses_state_str_in_conditions():
    state = VacuumState("A", False, False)
    plan = Plan(state="root", action="Suck", children=(
        Plan(state=state), Plan(state=VacuumState("A", False, True)),
    ))
    assert f"IF {state} THEN [NoOp]" in format_plan(plan)

def test_branches_are_separated_by_single_spaces():
    plan = Plan(state="s", action="Suck", children=(Plan(state="x"), Plan(state="y")))
    rendered = format_plan(plan)
    assert rendered == "Suck IF x THEN [NoOp] ELSE IF y THEN [NoOp]"
    assert "ELSE  IF" not in rendered

def test_plan_holds_plain_object_states():
    class Room:
        pass

    room = Room()
    plan = Plan(state=room, action=object(), children=(Plan(state=Room()),))
    assert plan.state is room
