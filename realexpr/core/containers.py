"""Canonical containers: n-ary sums and products and the unary base.

A container holds a non-empty tuple of child expressions and memoizes its
structural hash at construction. Commutative containers sort their children
with ``COMPARATOR`` unless asked to keep the caller's order, so the same
multiset of operands always yields the same stored order and hash.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, ClassVar, Iterable

from realexpr.core.errors import InvalidArgumentError, NullArgumentError
from realexpr.core.expression import COMPARATOR, Expression, Variable, _three_way, compare

if TYPE_CHECKING:
    from realexpr.visitors.base import Visitor


def _checked_children(children: Iterable[Expression] | None, sort_children: bool) -> tuple[Expression, ...]:
    if children is None:
        raise NullArgumentError("Child sequence must not be None")
    items = list(children)
    if not items:
        raise InvalidArgumentError("Child sequence must not be empty")
    for i, child in enumerate(items):
        if child is None:
            raise InvalidArgumentError(f"Child {i} is None")
        if not isinstance(child, Expression):
            raise InvalidArgumentError(
                f"Child {i} is a {type(child).__name__}, not an Expression"
            )
    if sort_children:
        items.sort(key=COMPARATOR)
    return tuple(items)


@dataclass(frozen=True, eq=False)
class SuperExpression(Expression):
    """Abstract container of one or more child expressions.

    ``HASH_OFFSET`` is mixed into the hash so that containers of different
    kinds holding the same children do not collide trivially. Equality checks
    the memoized hash first, then compares kind and children structurally.
    """

    children: tuple[Expression, ...]
    _hash: int = field(init=False, repr=False)

    HASH_OFFSET: ClassVar[int] = 0

    def __init__(self, children: Iterable[Expression] | None, sort_children: bool = False):
        stored = _checked_children(children, sort_children)
        object.__setattr__(self, "children", stored)
        object.__setattr__(self, "_hash", self.HASH_OFFSET + hash(stored))

    def variables(self) -> set[Variable]:
        result: set[Variable] = set()
        for child in self.children:
            result |= child.variables()
        return result

    def _compare_same_kind(self, other: SuperExpression) -> int:
        if type(self) is not type(other):
            return _three_way(type(self).__qualname__, type(other).__qualname__)
        for a, b in zip(self.children, other.children):
            c = compare(a, b)
            if c:
                return c
        return _three_way(len(self.children), len(other.children))

    def __hash__(self) -> int:
        return self._hash

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if type(other) is not type(self):
            return NotImplemented
        return self._hash == other._hash and self.children == other.children

    def __str__(self) -> str:
        args = ", ".join(str(c) for c in self.children)
        return f"{type(self).__name__}({args})"

    def __repr__(self) -> str:
        return str(self)


class Addition(SuperExpression):
    """Sum of one or more terms."""

    HASH_OFFSET = 59971
    kind_rank = 3

    def __init__(self, children: Iterable[Expression] | None, sort_children: bool = True):
        super().__init__(children, sort_children)

    def accept(self, visitor: Visitor[Any, Any], state: Any) -> Any:
        return visitor.visit_addition(self, state)

    def __str__(self) -> str:
        parts = []
        for c in self.children:
            parts.append(f"({c})" if isinstance(c, Addition) else str(c))
        return " + ".join(parts)


class Multiplication(SuperExpression):
    """Product of one or more factors."""

    HASH_OFFSET = 10867
    kind_rank = 2

    def __init__(self, children: Iterable[Expression] | None, sort_children: bool = True):
        super().__init__(children, sort_children)

    def accept(self, visitor: Visitor[Any, Any], state: Any) -> Any:
        return visitor.visit_multiplication(self, state)

    def __str__(self) -> str:
        parts = []
        for c in self.children:
            parts.append(f"({c})" if isinstance(c, (Addition, Multiplication)) else str(c))
        return "*".join(parts)


class UnaryExpression(SuperExpression):
    """Container with exactly one child; base class for unary operators.

    Concrete operators set ``name`` and implement ``apply`` (used by
    evaluation) and ``chain_rule`` (used by differentiation).
    """

    name: ClassVar[str] = "unary"
    kind_rank = 4

    def __init__(self, child: Expression):
        super().__init__([child], sort_children=False)

    @property
    def child(self) -> Expression:
        return self.children[0]

    def apply(self, value: float) -> float:
        raise NotImplementedError(f"{type(self).__name__} does not define evaluation")

    def chain_rule(self, child_derivative: Expression) -> Expression:
        raise NotImplementedError(f"{type(self).__name__} does not define a derivative")

    def accept(self, visitor: Visitor[Any, Any], state: Any) -> Any:
        return visitor.visit_unary(self, state)

    def __str__(self) -> str:
        return f"{self.name}({self.child})"


def re_add(*terms: Expression) -> Addition:
    """Sum of ``terms`` in canonical order."""
    return Addition(terms, sort_children=True)


def re_add_unsorted(*terms: Expression) -> Addition:
    """Sum of ``terms`` in the given order; the caller vouches for canonical order."""
    return Addition(terms, sort_children=False)


def re_mult(*factors: Expression) -> Multiplication:
    """Product of ``factors`` in canonical order."""
    return Multiplication(factors, sort_children=True)


def re_mult_unsorted(*factors: Expression) -> Multiplication:
    """Product of ``factors`` in the given order; the caller vouches for canonical order."""
    return Multiplication(factors, sort_children=False)
