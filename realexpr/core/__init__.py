from realexpr.core.assignment import Assignment
from realexpr.core.containers import (
    Addition, Multiplication, SuperExpression, UnaryExpression,
    re_add, re_add_unsorted, re_mult, re_mult_unsorted,
)
from realexpr.core.errors import (
    ExpressionError, IncompleteAssignmentError, InvalidArgumentError,
    NullArgumentError, ParseError,
)
from realexpr.core.expression import COMPARATOR, ONE, ZERO, Constant, Expression, Variable, compare
from realexpr.core.parser import parse_expr
from realexpr.core.unary import UNARY_OPERATORS, Cosine, Exp, Log, Negation, Reciprocal, Sine

__all__ = [
    "Expression", "Variable", "Constant", "ZERO", "ONE", "compare", "COMPARATOR",
    "Assignment",
    "SuperExpression", "Addition", "Multiplication", "UnaryExpression",
    "re_add", "re_add_unsorted", "re_mult", "re_mult_unsorted",
    "Negation", "Reciprocal", "Sine", "Cosine", "Exp", "Log", "UNARY_OPERATORS",
    "parse_expr",
    "ExpressionError", "NullArgumentError", "InvalidArgumentError",
    "IncompleteAssignmentError", "ParseError",
]
