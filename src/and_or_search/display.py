# display.py
# All terminal output for the And-Or search.
#
# The engine never formats strings. When tracing is on it calls named
# functions here. Swap this file to change the entire UI.
#
# Colour language:
#   cyan: OR nodes (choosing an action)
#   magenta: AND nodes (covering every outcome)
#   green: goals / success
#   yellow: pruned branches (cycles, dead ends)
#   red: failures and contract violations

from typing import Any

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.rule import Rule
from rich.text import Text
from rich.tree import Tree

from and_or_search.errors import ContractViolationError
from and_or_search.plan import NO_OP, Plan
from and_or_search.problem import NonDeterministicProblem
from and_or_search.result import SearchResult, Success

console = Console()


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _label(tag: str, color: str) -> Text:
    t = Text()
    t.append(f" {tag} ", style=f"bold white on {color}")
    return t


def _mono(value: Any, max_len: int = 80) -> str:
    text = str(value)
    if len(text) > max_len:
        text = text[:max_len] + "…"
    return escape(text)


def _indent(depth: int) -> str:
    return "  " * (depth + 1)


# ---------------------------------------------------------------------------
# Entry
# ---------------------------------------------------------------------------


def banner(title: str, subtitle: str = "") -> None:
    console.print()
    body = f"[bold cyan]{title}[/bold cyan]"
    if subtitle:
        body += f"\n[dim]{subtitle}[/dim]"
    console.print(Panel.fit(body, border_style="cyan", padding=(1, 4)))


def search_start(problem: NonDeterministicProblem) -> None:
    console.print()
    console.print(Rule(f"[cyan]AND-OR SEARCH: {type(problem).__name__}[/cyan]", style="cyan"))
    console.print(f"  [dim]Initial state:[/dim] [white]{_mono(problem.initial_state)}[/white]")


# ---------------------------------------------------------------------------
# OR phase
# ---------------------------------------------------------------------------


def or_node(state: Any, depth: int) -> None:
    console.print(f"{_indent(depth)}[cyan]OR[/cyan]   [white]{_mono(state)}[/white]")


def goal_reached(state: Any, depth: int) -> None:
    console.print(f"{_indent(depth)}[bold green]✓ goal[/bold green] [dim]{_mono(state)}[/dim]")


def cycle_detected(state: Any, depth: int) -> None:
    console.print(
        f"{_indent(depth)}[yellow]↺ cycle[/yellow] [dim]{_mono(state)} already on path[/dim]"
    )


def dead_end(state: Any, depth: int) -> None:
    console.print(
        f"{_indent(depth)}[yellow]✗ no action works[/yellow] [dim]{_mono(state)}[/dim]"
    )


# ---------------------------------------------------------------------------
# AND phase
# ---------------------------------------------------------------------------


def and_node(state: Any, action: Any, outcomes: list[Any], depth: int) -> None:
    console.print(
        f"{_indent(depth)}[magenta]AND[/magenta]  [bold white]{_mono(action)}[/bold white]"
        f" [dim]from {_mono(state)} → {len(outcomes)} outcome(s)[/dim]"
    )


def outcome_failed(state: Any, action: Any, outcome: Any, depth: int) -> None:
    console.print(
        f"{_indent(depth)}[red]✗ {_mono(action)}[/red] [dim]cannot cover outcome {_mono(outcome)}[/dim]"
    )


# ---------------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------------


def plan_tree(plan: Plan) -> Tree:
    """Build a rich Tree mirroring the plan; each branch is labelled with its state."""

    def node_label(node: Plan) -> str:
        if node.action is None:
            return f"[bold green]{NO_OP}[/bold green] [dim]{_mono(node.state)}[/dim]"
        return f"[bold cyan]{_mono(node.action)}[/bold cyan] [dim]@ {_mono(node.state)}[/dim]"

    def attach(branch: Tree, node: Plan) -> None:
        for child in node.children:
            if len(node.children) > 1:
                sub = branch.add(f"[magenta]IF[/magenta] {_mono(child.state)}")
                sub = sub.add(node_label(child))
            else:
                sub = branch.add(node_label(child))
            attach(sub, child)

    root = Tree(node_label(plan))
    attach(root, plan)
    return root


def show_plan(plan: Plan) -> None:
    console.print()
    console.print(
        Panel(
            plan_tree(plan),
            title=_label("CONDITIONAL PLAN", "green"),
            subtitle=f"[dim]{plan.size()} node(s), depth {plan.depth()}[/dim]",
            border_style="green",
            padding=(0, 2),
        )
    )
    console.print(f"  [dim]{escape(str(plan))}[/dim]")


def search_complete(result: SearchResult) -> None:
    console.print()
    if isinstance(result, Success):
        console.print(_label("SEARCH", "green"), "[green] plan found[/green]")
    else:
        console.print(_label("SEARCH", "red"), "[red] no conditional plan exists[/red]")


def show_result(result: SearchResult) -> None:
    if isinstance(result, Success):
        show_plan(result.plan)
        return
    console.print()
    console.print(
        Panel(
            "[bold red]No conditional plan reaches the goal from the initial state.[/bold red]\n"
            "[dim]Every action either hits a cycle, a dead end, or an uncoverable outcome.[/dim]",
            title=_label("FAILURE ✗", "red"),
            border_style="red",
            padding=(0, 2),
        )
    )


def plan_check(errors: list[str]) -> None:
    if not errors:
        console.print("  [bold green]✓ Plan verified against the problem[/bold green]")
        return
    for error in errors:
        console.print(f"  [bold red]✗[/bold red] [white]{escape(error)}[/white]")


def contract_violation(error: ContractViolationError) -> None:
    console.print()
    console.print(
        Panel(
            f"[bold red]{escape(str(error))}[/bold red]\n"
            "[dim]The problem offered an action with no outcomes. Fix the problem definition.[/dim]",
            title=_label("CONTRACT VIOLATION ✗", "red"),
            border_style="red",
            padding=(0, 2),
        )
    )
