"""Variable bindings used to evaluate expressions."""

from __future__ import annotations

from typing import Iterable, Iterator, Mapping

from realexpr.core.expression import Variable


class Assignment:
    """A mutable mapping from Variable to a real value.

    Not part of the immutable expression graph and not synchronized: treat
    each instance as owned by a single evaluation at a time.
    """

    def __init__(self, values: Mapping[Variable, float] | None = None):
        self._values: dict[Variable, float] = {}
        for variable, value in (values or {}).items():
            self.put(variable, value)

    @classmethod
    def from_names(cls, values: Mapping[str, float]) -> Assignment:
        """Build an assignment keyed by variable name: {"x": 2.0} -> {x: 2.0}."""
        return cls({Variable(name): value for name, value in values.items()})

    def get(self, variable: Variable) -> float | None:
        """Return the bound value, or None if the variable is unbound."""
        return self._values.get(variable)

    def put(self, variable: Variable, value: float) -> None:
        if not isinstance(variable, Variable):
            raise TypeError(f"Assignment keys must be Variables, got {type(variable).__name__}")
        self._values[variable] = float(value)

    def contains_all(self, variables: Iterable[Variable]) -> bool:
        return all(v in self._values for v in variables)

    def items(self) -> list[tuple[Variable, float]]:
        return list(self._values.items())

    def copy(self) -> Assignment:
        return Assignment(self._values)

    def __contains__(self, variable: object) -> bool:
        return variable in self._values

    def __iter__(self) -> Iterator[Variable]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        pairs = ", ".join(f"{v.name}={value:g}" for v, value in self._values.items())
        return f"Assignment({pairs})"
