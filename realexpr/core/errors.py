"""Exceptions raised while building, parsing or evaluating expressions."""

from __future__ import annotations

from typing import Any


class ExpressionError(Exception):
    """Base class for all errors raised by realexpr."""


class NullArgumentError(ExpressionError, TypeError):
    """A required constructor argument was None."""


class InvalidArgumentError(ExpressionError, ValueError):
    """A child sequence was empty or held an entry that is not an expression."""


class IncompleteAssignmentError(ExpressionError, LookupError):
    """Evaluation reached a variable that has no value in the assignment."""

    def __init__(self, variable: Any):
        super().__init__(f"No value assigned to variable {variable!r}")
        self.variable = variable


class ParseError(ExpressionError, ValueError):
    """Infix text could not be parsed into an expression."""
