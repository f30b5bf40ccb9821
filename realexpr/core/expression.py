"""The expression contract, its canonical ordering, and the leaf nodes.

Every node is immutable once constructed. Containers live in
``realexpr.core.containers``; this module only knows about leaves so that the
containers can build on it.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import cmp_to_key
from typing import TYPE_CHECKING, Any, ClassVar

if TYPE_CHECKING:
    from realexpr.core.assignment import Assignment
    from realexpr.visitors.base import Visitor


class Expression:
    """Base class for all expression nodes.

    Subclasses set ``kind_rank``, which orders node kinds for canonical
    sorting, and implement ``variables``, ``accept`` and
    ``_compare_same_kind``.
    """

    kind_rank: ClassVar[int]

    def variables(self) -> set[Variable]:
        raise NotImplementedError

    def accept(self, visitor: Visitor[Any, Any], state: Any) -> Any:
        raise NotImplementedError

    def _compare_same_kind(self, other: Any) -> int:
        raise NotImplementedError

    def evaluate(self, assignment: Assignment) -> float:
        from realexpr.visitors.evaluator import evaluate
        return evaluate(self, assignment)

    def derivative(self, variable: Variable) -> Expression:
        from realexpr.visitors.differentiator import differentiate
        return differentiate(self, variable)

    # --- Operator sugar; builds canonical containers, never simplifies ---

    def __add__(self, other: Any) -> Expression:
        from realexpr.core.containers import re_add
        return re_add(self, as_expression(other))

    def __radd__(self, other: Any) -> Expression:
        from realexpr.core.containers import re_add
        return re_add(as_expression(other), self)

    def __mul__(self, other: Any) -> Expression:
        from realexpr.core.containers import re_mult
        return re_mult(self, as_expression(other))

    def __rmul__(self, other: Any) -> Expression:
        from realexpr.core.containers import re_mult
        return re_mult(as_expression(other), self)

    def __neg__(self) -> Expression:
        from realexpr.core.unary import Negation
        return Negation(self)

    def __sub__(self, other: Any) -> Expression:
        return self + (-as_expression(other))

    def __rsub__(self, other: Any) -> Expression:
        return as_expression(other) + (-self)

    def __truediv__(self, other: Any) -> Expression:
        from realexpr.core.unary import Reciprocal
        return self * Reciprocal(as_expression(other))

    def __rtruediv__(self, other: Any) -> Expression:
        from realexpr.core.unary import Reciprocal
        return as_expression(other) * Reciprocal(self)


def as_expression(value: Any) -> Expression:
    """Wrap plain numbers into a Constant; pass expressions through."""
    if isinstance(value, Expression):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return Constant(value)
    raise TypeError(f"Cannot use {type(value).__name__} as an expression")


def _three_way(a: Any, b: Any) -> int:
    return (a > b) - (a < b)


def compare(a: Expression, b: Expression) -> int:
    """Total order over expressions used to canonicalize commutative operands.

    Kinds are ranked Constant < Variable < Multiplication < Addition < unary.
    Within a kind, constants compare by value and variables by name;
    containers compare by operator name (for unary subclasses), then child by
    child in stored order, then by child count.
    """
    if a is b:
        return 0
    if a.kind_rank != b.kind_rank:
        return _three_way(a.kind_rank, b.kind_rank)
    return a._compare_same_kind(b)


COMPARATOR = cmp_to_key(compare)


@dataclass(frozen=True)
class Variable(Expression):
    """A symbolic unknown, identified by its name."""

    name: str
    kind_rank: ClassVar[int] = 1

    def variables(self) -> set[Variable]:
        return {self}

    def accept(self, visitor: Visitor[Any, Any], state: Any) -> Any:
        return visitor.visit_variable(self, state)

    def _compare_same_kind(self, other: Variable) -> int:
        return _three_way(self.name, other.name)

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Constant(Expression):
    """A numeric literal."""

    value: float
    kind_rank: ClassVar[int] = 0

    def __post_init__(self):
        object.__setattr__(self, "value", float(self.value))

    def variables(self) -> set[Variable]:
        return set()

    def accept(self, visitor: Visitor[Any, Any], state: Any) -> Any:
        return visitor.visit_constant(self, state)

    def _compare_same_kind(self, other: Constant) -> int:
        return _three_way(self.value, other.value)

    def __str__(self) -> str:
        if self.value.is_integer():
            return str(int(self.value))
        return repr(self.value)

    def __repr__(self) -> str:
        return str(self)


ZERO = Constant(0.0)
ONE = Constant(1.0)
