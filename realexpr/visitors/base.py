"""Double-dispatch protocol for recursive operations over expressions.

Each node's ``accept`` calls exactly one ``visit_*`` method, the one for its
own kind, passing the caller's state through. A visitor decides for itself
whether and how to recurse, by calling ``accept`` on children.

All handlers are abstract, so a visitor that misses a node kind cannot be
instantiated.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Generic, TypeVar

if TYPE_CHECKING:
    from realexpr.core.containers import Addition, Multiplication, UnaryExpression
    from realexpr.core.expression import Constant, Variable

ResultT = TypeVar("ResultT")
StateT = TypeVar("StateT")


class Visitor(ABC, Generic[ResultT, StateT]):
    """One handler per node kind; ResultT is returned, StateT is threaded through."""

    @abstractmethod
    def visit_addition(self, node: Addition, state: StateT) -> ResultT:
        ...

    @abstractmethod
    def visit_multiplication(self, node: Multiplication, state: StateT) -> ResultT:
        ...

    @abstractmethod
    def visit_unary(self, node: UnaryExpression, state: StateT) -> ResultT:
        ...

    @abstractmethod
    def visit_variable(self, node: Variable, state: StateT) -> ResultT:
        ...

    @abstractmethod
    def visit_constant(self, node: Constant, state: StateT) -> ResultT:
        ...
