"""Symbolic differentiation.

The result is a fresh expression tree built with the canonical constructors.
No simplification is attempted: d(x*y)/dx is ``0*x + 1*y``, which evaluates
to y but is not reduced to it.
"""

from __future__ import annotations

import logging

from realexpr.core.containers import Addition, Multiplication, UnaryExpression, re_add, re_mult
from realexpr.core.expression import ONE, ZERO, Constant, Expression, Variable
from realexpr.visitors.base import Visitor

log = logging.getLogger(__name__)


class Differentiator(Visitor[Expression, Variable]):
    """Derivative with respect to the target variable passed as state."""

    def visit_addition(self, node: Addition, state: Variable) -> Expression:
        return re_add(*(child.accept(self, state) for child in node.children))

    def visit_multiplication(self, node: Multiplication, state: Variable) -> Expression:
        # Product rule: sum over i of f1 * ... * fi' * ... * fn
        children = node.children
        terms = []
        for i, child in enumerate(children):
            factors = list(children)
            factors[i] = child.accept(self, state)
            terms.append(re_mult(*factors))
        return re_add(*terms)

    def visit_unary(self, node: UnaryExpression, state: Variable) -> Expression:
        return node.chain_rule(node.child.accept(self, state))

    def visit_variable(self, node: Variable, state: Variable) -> Expression:
        return ONE if node == state else ZERO

    def visit_constant(self, node: Constant, state: Variable) -> Expression:
        return ZERO


_DIFFERENTIATOR = Differentiator()


def differentiate(expression: Expression, variable: Variable) -> Expression:
    """Derivative of ``expression`` with respect to ``variable``."""
    if not isinstance(variable, Variable):
        raise TypeError(f"Can only differentiate with respect to a Variable, got {variable!r}")
    log.debug("Differentiating %s with respect to %s", expression, variable)
    return expression.accept(_DIFFERENTIATOR, variable)
