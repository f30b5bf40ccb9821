"""CLI interface for building, evaluating and differentiating expressions.

Usage:
    realexpr show "x*y + sin(x)"
    realexpr vars "(x + y)*z"
    realexpr eval "x*y + x" -a x=2 -a y=3
    realexpr diff "x*y" --wrt x -a x=1 -a y=5
"""

from __future__ import annotations

import logging
import sys

import click
from rich.console import Console

from realexpr.core.assignment import Assignment
from realexpr.core.errors import ExpressionError
from realexpr.core.expression import Expression, Variable
from realexpr.core.parser import parse_expr

console = Console()


def _parse_or_exit(text: str) -> Expression:
    try:
        return parse_expr(text)
    except ExpressionError as e:
        console.print(f"[red]Could not parse expression: {e}[/red]")
        sys.exit(2)


def _parse_bindings(bindings: tuple[str, ...]) -> Assignment:
    """Turn ("x=2", "y=3") into an Assignment."""
    values: dict[str, float] = {}
    for binding in bindings:
        name, sep, raw = binding.partition("=")
        if not sep or not name.strip():
            raise click.BadParameter(f"Expected NAME=VALUE, got {binding!r}", param_hint="--assign")
        try:
            values[name.strip()] = float(raw)
        except ValueError:
            raise click.BadParameter(f"Not a number: {raw!r}", param_hint="--assign")
    return Assignment.from_names(values)


def _evaluate_or_exit(expr: Expression, assignment: Assignment) -> float:
    try:
        return expr.evaluate(assignment)
    except ExpressionError as e:
        console.print(f"[red]{e}[/red]")
        sys.exit(1)
    except (ValueError, ZeroDivisionError, OverflowError) as e:
        console.print(f"[red]Evaluation failed: {e}[/red]")
        sys.exit(1)


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx: click.Context, verbose: bool) -> None:
    """Symbolic real-valued expressions: evaluate and differentiate."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")


@main.command()
@click.argument("expression")
def show(expression: str) -> None:
    """Show the canonical form and tree of an expression."""
    from realexpr.utils.display import display_expression

    display_expression(_parse_or_exit(expression))


@main.command("vars")
@click.argument("expression")
def list_vars(expression: str) -> None:
    """List the free variables of an expression."""
    from realexpr.utils.display import display_variables

    display_variables(_parse_or_exit(expression))


@main.command("eval")
@click.argument("expression")
@click.option("--assign", "-a", multiple=True, help="Variable binding NAME=VALUE (repeatable)")
def eval_cmd(expression: str, assign: tuple[str, ...]) -> None:
    """Evaluate an expression under the given bindings."""
    from realexpr.utils.display import display_evaluation

    expr = _parse_or_exit(expression)
    assignment = _parse_bindings(assign)
    value = _evaluate_or_exit(expr, assignment)
    display_evaluation(expr, assignment, value)


@main.command()
@click.argument("expression")
@click.option("--wrt", required=True, help="Variable to differentiate with respect to")
@click.option("--assign", "-a", multiple=True, help="Evaluate the derivative at NAME=VALUE (repeatable)")
def diff(expression: str, wrt: str, assign: tuple[str, ...]) -> None:
    """Differentiate an expression, optionally evaluating the result."""
    from realexpr.utils.display import display_derivative

    expr = _parse_or_exit(expression)
    variable = Variable(wrt)
    derivative = expr.derivative(variable)
    display_derivative(expr, variable, derivative)

    if assign:
        assignment = _parse_bindings(assign)
        value = _evaluate_or_exit(derivative, assignment)
        console.print(f"[bold]Value:[/bold] {value:g}")


if __name__ == "__main__":
    main()
