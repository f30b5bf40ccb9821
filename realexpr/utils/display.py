"""Rich console display utilities for expressions."""

from __future__ import annotations

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.tree import Tree

from realexpr.core.assignment import Assignment
from realexpr.core.containers import SuperExpression, UnaryExpression
from realexpr.core.expression import Constant, Expression, Variable

console = Console()


def expression_tree(expr: Expression, tree: Tree | None = None) -> Tree:
    """Build a rich Tree mirroring the structure of ``expr``."""
    if isinstance(expr, Variable):
        label = f"[cyan]{expr.name}[/cyan]"
    elif isinstance(expr, Constant):
        label = f"[green]{expr}[/green]"
    elif isinstance(expr, UnaryExpression):
        label = f"[yellow]{expr.name}[/yellow]"
    else:
        label = f"[magenta]{type(expr).__name__}[/magenta]"

    node = Tree(label) if tree is None else tree.add(label)
    if isinstance(expr, SuperExpression):
        for child in expr.children:
            expression_tree(child, node)
    return node


def display_expression(expr: Expression) -> None:
    """Display an expression's canonical text and its tree."""
    console.print(Panel(expression_tree(expr), title=str(expr), border_style="blue"))


def display_variables(expr: Expression) -> None:
    names = sorted(v.name for v in expr.variables())
    if names:
        console.print(f"[bold]Variables:[/bold] {', '.join(names)}")
    else:
        console.print("[dim]No free variables[/dim]")


def display_evaluation(expr: Expression, assignment: Assignment, value: float) -> None:
    """Display the bindings used and the resulting value."""
    table = Table(title=f"Evaluation: {expr}")
    table.add_column("Variable", style="cyan")
    table.add_column("Value", style="green", justify="right")

    for variable, bound in sorted(assignment.items(), key=lambda item: item[0].name):
        table.add_row(variable.name, f"{bound:g}")
    table.add_row("result", f"{value:g}", style="bold green")

    console.print(table)


def display_derivative(expr: Expression, variable: Variable, derivative: Expression) -> None:
    console.print(Panel(
        f"[bold]d/d{variable.name}[/bold] {expr}\n= {derivative}",
        title="Derivative",
        border_style="green",
    ))
