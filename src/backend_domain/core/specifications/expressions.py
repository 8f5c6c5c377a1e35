"""Storage-agnostic filter expressions.

A filter is a small tree of ``Criterion`` leaves joined by ``AllOf``,
``AnyOf`` and ``Not``. The tree can be evaluated against objects in memory
or translated to a query language by walking it.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, Tuple

from ..exceptions import DomainValidationError


class Operator(str, Enum):
    EQ = "eq"
    NE = "ne"
    GT = "gt"
    GE = "ge"
    LT = "lt"
    LE = "le"
    IN = "in"
    CONTAINS = "contains"
    IS_NULL = "is_null"


def resolve_path(obj: Any, path: str) -> Any:
    """Follow a dotted attribute path; a missing link resolves to None."""
    current = obj
    for part in path.split("."):
        if current is None:
            return None
        current = getattr(current, part, None)
    return current


def _comparable(value: Any) -> Any:
    # Enums and single-value wrappers compare by their underlying value
    if isinstance(value, Enum):
        return value.value
    return value


def _contains(actual: Any, expected: Any) -> bool:
    if actual is None:
        return False
    if isinstance(actual, str):
        return str(expected).lower() in actual.lower()
    return expected in actual


_OPERATIONS: Dict[Operator, Callable[[Any, Any], bool]] = {
    Operator.EQ: lambda actual, expected: actual == expected,
    Operator.NE: lambda actual, expected: actual != expected,
    Operator.GT: lambda actual, expected: actual is not None and actual > expected,
    Operator.GE: lambda actual, expected: actual is not None and actual >= expected,
    Operator.LT: lambda actual, expected: actual is not None and actual < expected,
    Operator.LE: lambda actual, expected: actual is not None and actual <= expected,
    Operator.IN: lambda actual, expected: actual in expected,
    Operator.CONTAINS: _contains,
    Operator.IS_NULL: lambda actual, expected: (actual is None) == bool(expected),
}


class Expression:
    """Base node; supports ``&``, ``|`` and ``~``."""

    def evaluate(self, obj: Any) -> bool:
        raise NotImplementedError

    def __and__(self, other: 'Expression') -> 'AllOf':
        return AllOf((self, other))

    def __or__(self, other: 'Expression') -> 'AnyOf':
        return AnyOf((self, other))

    def __invert__(self) -> 'Not':
        return Not(self)


@dataclass(frozen=True)
class Criterion(Expression):
    field: str
    operator: Operator
    value: Any = None

    def __post_init__(self):
        if not self.field:
            raise DomainValidationError("Criterion field cannot be empty", field_name="field")
        object.__setattr__(self, 'operator', Operator(self.operator))
        if self.operator == Operator.IN:
            object.__setattr__(self, 'value', tuple(self.value))

    def evaluate(self, obj: Any) -> bool:
        actual = _comparable(resolve_path(obj, self.field))
        expected = self.value
        if self.operator == Operator.IN:
            expected = tuple(_comparable(item) for item in expected)
        else:
            expected = _comparable(expected)
        return _OPERATIONS[self.operator](actual, expected)


@dataclass(frozen=True)
class AllOf(Expression):
    children: Tuple[Expression, ...]

    def __post_init__(self):
        object.__setattr__(self, 'children', tuple(self.children))

    def evaluate(self, obj: Any) -> bool:
        return all(child.evaluate(obj) for child in self.children)


@dataclass(frozen=True)
class AnyOf(Expression):
    children: Tuple[Expression, ...]

    def __post_init__(self):
        object.__setattr__(self, 'children', tuple(self.children))

    def evaluate(self, obj: Any) -> bool:
        return any(child.evaluate(obj) for child in self.children)


@dataclass(frozen=True)
class Not(Expression):
    child: Expression

    def evaluate(self, obj: Any) -> bool:
        return not self.child.evaluate(obj)


@dataclass(frozen=True)
class MatchAll(Expression):
    """Filter that accepts everything; used by unfiltered specifications."""

    def evaluate(self, obj: Any) -> bool:
        return True


def eq(field: str, value: Any) -> Criterion:
    return Criterion(field, Operator.EQ, value)


def ne(field: str, value: Any) -> Criterion:
    return Criterion(field, Operator.NE, value)


def is_in(field: str, values) -> Criterion:
    return Criterion(field, Operator.IN, tuple(values))


def is_null(field: str, null: bool = True) -> Criterion:
    return Criterion(field, Operator.IS_NULL, null)
