# plan.py
# Conditional plan tree produced by the And-Or search.
#
# A Plan is frozen once built. The engine collects children through a
# PlanBuilder and only freezes the node after every outcome is resolved,
# so callers never see a partially built subtree.

from typing import Any, Iterator

from pydantic import BaseModel, ConfigDict, Field, model_validator

NO_OP = "NoOp"


class Plan(BaseModel):
    """A node of a conditional plan: the action to take in `state`, one child per outcome."""

    model_config = ConfigDict(frozen=True)

    state: Any = Field(..., description="State this node applies to.")
    action: Any = Field(default=None, description="Chosen action, None at a goal leaf.")
    children: tuple["Plan", ...] = Field(
        default=(), description="Sub-plans in the order the action's outcomes were enumerated."
    )

    @model_validator(mode="after")
    def _leaf_has_no_children(self) -> "Plan":
        if self.action is None and self.children:
            raise ValueError("A plan node without an action must be a leaf.")
        return self

    @property
    def is_leaf(self) -> bool:
        return not self.children

    def walk(self) -> Iterator["Plan"]:
        """Pre-order traversal of this node and every descendant."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    def leaves(self) -> list["Plan"]:
        return [node for node in self.walk() if node.is_leaf]

    def depth(self) -> int:
        """Number of edges on the longest root-to-leaf branch."""
        if self.is_leaf:
            return 0
        return 1 + max(child.depth() for child in self.children)

    def size(self) -> int:
        return sum(1 for _ in self.walk())

    def __str__(self) -> str:
        return format_plan(self)


Plan.model_rebuild()


class PlanBuilder:
    """
    Append-only staging area for a single plan node.

    Children are added in outcome order; build() freezes them into a Plan.
    A builder can be built exactly once.
    """

    def __init__(self, state: Any, action: Any) -> None:
        self._state = state
        self._action = action
        self._children: list[Plan] = []
        self._built = False

    def add_child(self, plan: Plan) -> None:
        if self._built:
            raise RuntimeError("Cannot add children to a plan that has already been built.")
        self._children.append(plan)

    def build(self) -> Plan:
        if self._built:
            raise RuntimeError("Plan has already been built.")
        self._built = True
        return Plan(state=self._state, action=self._action, children=tuple(self._children))


# ---------------------------------------------------------------------------
# Text rendering
# ---------------------------------------------------------------------------


def _action_label(action: Any) -> str:
    return NO_OP if action is None else str(action)


def format_plan(plan: Plan) -> str:
    """
    Render a plan as a single line of nested IF/THEN/ELSE branches.

    One child continues the sequence inline; several children each become
    an `IF <state> THEN [...]` branch, joined by ELSE. Branches are
    separated by single spaces (`... ELSE IF ...`); the older rendering
    this replaces left a doubled space before IF, which is not kept.
    """
    label = _action_label(plan.action)
    if len(plan.children) == 1:
        return f"{label} {format_plan(plan.children[0])}"
    if not plan.children:
        return label
    branches = [
        f" IF {child.state} THEN [{format_plan(child)}]" for child in plan.children
    ]
    return label + " ELSE".join(branches)
