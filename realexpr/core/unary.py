"""Concrete unary operators.

Each operator supplies its evaluation rule (``apply``) and its chain rule
(``chain_rule``), which the Evaluator and Differentiator defer to.
"""

from __future__ import annotations

import math

from realexpr.core.containers import UnaryExpression, re_mult
from realexpr.core.expression import Expression


class Negation(UnaryExpression):
    name = "neg"
    HASH_OFFSET = 30011

    def apply(self, value: float) -> float:
        return -value

    def chain_rule(self, child_derivative: Expression) -> Expression:
        return Negation(child_derivative)


class Reciprocal(UnaryExpression):
    """1/u; evaluating at zero raises ZeroDivisionError."""

    name = "inv"
    HASH_OFFSET = 40009

    def apply(self, value: float) -> float:
        return 1.0 / value

    def chain_rule(self, child_derivative: Expression) -> Expression:
        # d(1/u) = -(1/u)^2 * u'
        return Negation(re_mult(self, self, child_derivative))


class Sine(UnaryExpression):
    name = "sin"
    HASH_OFFSET = 50021

    def apply(self, value: float) -> float:
        return math.sin(value)

    def chain_rule(self, child_derivative: Expression) -> Expression:
        return re_mult(Cosine(self.child), child_derivative)


class Cosine(UnaryExpression):
    name = "cos"
    HASH_OFFSET = 60013

    def apply(self, value: float) -> float:
        return math.cos(value)

    def chain_rule(self, child_derivative: Expression) -> Expression:
        return Negation(re_mult(Sine(self.child), child_derivative))


class Exp(UnaryExpression):
    name = "exp"
    HASH_OFFSET = 70001

    def apply(self, value: float) -> float:
        return math.exp(value)

    def chain_rule(self, child_derivative: Expression) -> Expression:
        return re_mult(self, child_derivative)


class Log(UnaryExpression):
    """Natural logarithm; non-positive arguments raise ValueError."""

    name = "log"
    HASH_OFFSET = 80021

    def apply(self, value: float) -> float:
        return math.log(value)

    def chain_rule(self, child_derivative: Expression) -> Expression:
        return re_mult(Reciprocal(self.child), child_derivative)


UNARY_OPERATORS: dict[str, type[UnaryExpression]] = {
    op.name: op for op in (Negation, Reciprocal, Sine, Cosine, Exp, Log)
}
