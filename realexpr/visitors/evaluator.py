"""Numeric evaluation of an expression under an assignment."""

from __future__ import annotations

import logging
import math

from realexpr.core.assignment import Assignment
from realexpr.core.containers import Addition, Multiplication, UnaryExpression
from realexpr.core.errors import IncompleteAssignmentError
from realexpr.core.expression import Constant, Expression, Variable
from realexpr.visitors.base import Visitor

log = logging.getLogger(__name__)


class Evaluator(Visitor[float, Assignment]):
    """Computes the real value of an expression.

    Raises IncompleteAssignmentError on the first variable without a binding.
    Unary nodes combine their child's value with the operator's ``apply``.
    """

    def visit_addition(self, node: Addition, state: Assignment) -> float:
        return sum(child.accept(self, state) for child in node.children)

    def visit_multiplication(self, node: Multiplication, state: Assignment) -> float:
        return math.prod(child.accept(self, state) for child in node.children)

    def visit_unary(self, node: UnaryExpression, state: Assignment) -> float:
        return node.apply(node.child.accept(self, state))

    def visit_variable(self, node: Variable, state: Assignment) -> float:
        value = state.get(node)
        if value is None:
            raise IncompleteAssignmentError(node)
        return value

    def visit_constant(self, node: Constant, state: Assignment) -> float:
        return node.value


_EVALUATOR = Evaluator()


def evaluate(expression: Expression, assignment: Assignment) -> float:
    """Evaluate ``expression`` with the variable values in ``assignment``."""
    log.debug("Evaluating %s with %r", expression, assignment)
    return expression.accept(_EVALUATOR, assignment)
