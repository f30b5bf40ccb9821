"""Parse infix text such as ``x*y + sin(x)`` into expressions.

Grammar:
    expr   := term (('+' | '-') term)*
    term   := factor (('*' | '/') factor)*
    factor := '-' factor | atom
    atom   := NUMBER | IDENT | IDENT '(' expr ')' | '(' expr ')'

Function names must be registered in ``UNARY_OPERATORS``. Subtraction and
division build ``a + neg(b)`` and ``a * inv(b)``; a minus directly in front
of a number is read as a negative constant.
"""

from __future__ import annotations

import re

from realexpr.core.containers import re_add, re_mult
from realexpr.core.errors import ParseError
from realexpr.core.expression import Constant, Expression, Variable
from realexpr.core.unary import UNARY_OPERATORS, Negation, Reciprocal

_IDENT_RE = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")
_NUMBER_RE = re.compile(r"(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def _tokenize(text: str) -> list[str]:
    """Split text into numbers, identifiers, operators and parentheses."""
    tokens: list[str] = []
    i = 0
    while i < len(text):
        ch = text[i]
        if ch in " \t\n":
            i += 1
        elif ch in "+-*/()":
            tokens.append(ch)
            i += 1
        else:
            m = _NUMBER_RE.match(text, i) or _IDENT_RE.match(text, i)
            if m:
                tokens.append(m.group())
                i = m.end()
            else:
                raise ParseError(f"Unexpected character {ch!r} at position {i} in {text!r}")
    return tokens


def parse_expr(text: str) -> Expression:
    """Parse an infix expression string into a canonical expression tree."""
    tokens = _tokenize(text)
    expr, pos = _parse_sum(tokens, 0)
    if pos != len(tokens):
        raise ParseError(f"Unexpected tokens after position {pos}: {tokens[pos:]}")
    return expr


def _parse_sum(tokens: list[str], pos: int) -> tuple[Expression, int]:
    term, pos = _parse_product(tokens, pos)
    terms = [term]
    while pos < len(tokens) and tokens[pos] in "+-":
        op = tokens[pos]
        term, pos = _parse_product(tokens, pos + 1)
        terms.append(term if op == "+" else Negation(term))
    if len(terms) == 1:
        return terms[0], pos
    return re_add(*terms), pos


def _parse_product(tokens: list[str], pos: int) -> tuple[Expression, int]:
    factor, pos = _parse_factor(tokens, pos)
    factors = [factor]
    while pos < len(tokens) and tokens[pos] in "*/":
        op = tokens[pos]
        factor, pos = _parse_factor(tokens, pos + 1)
        factors.append(factor if op == "*" else Reciprocal(factor))
    if len(factors) == 1:
        return factors[0], pos
    return re_mult(*factors), pos


def _parse_factor(tokens: list[str], pos: int) -> tuple[Expression, int]:
    if pos >= len(tokens):
        raise ParseError("Unexpected end of expression")
    if tokens[pos] == "-":
        pos += 1
        if pos < len(tokens) and _NUMBER_RE.fullmatch(tokens[pos]):
            return Constant(-float(tokens[pos])), pos + 1
        operand, pos = _parse_factor(tokens, pos)
        return Negation(operand), pos
    return _parse_atom(tokens, pos)


def _parse_atom(tokens: list[str], pos: int) -> tuple[Expression, int]:
    tok = tokens[pos]

    if tok == "(":
        inner, pos = _parse_sum(tokens, pos + 1)
        return inner, _expect_close(tokens, pos)

    if _NUMBER_RE.fullmatch(tok):
        return Constant(float(tok)), pos + 1

    if _IDENT_RE.fullmatch(tok):
        pos += 1
        # Function application: IDENT '(' expr ')'
        if pos < len(tokens) and tokens[pos] == "(":
            op = UNARY_OPERATORS.get(tok)
            if op is None:
                known = ", ".join(sorted(UNARY_OPERATORS))
                raise ParseError(f"Unknown function {tok!r} (known: {known})")
            arg, pos = _parse_sum(tokens, pos + 1)
            return op(arg), _expect_close(tokens, pos)
        return Variable(tok), pos

    raise ParseError(f"Unexpected token {tok!r} at position {pos}")


def _expect_close(tokens: list[str], pos: int) -> int:
    if pos >= len(tokens) or tokens[pos] != ")":
        raise ParseError(f"Expected ')' at position {pos}")
    return pos + 1
