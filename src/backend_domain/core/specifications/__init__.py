"""Specification pattern: expressions, immutable specifications and evaluation."""

from .evaluator import SpecificationEvaluator
from .expressions import (
    AllOf,
    AnyOf,
    Criterion,
    Expression,
    MatchAll,
    Not,
    Operator,
    eq,
    is_in,
    is_null,
    ne,
    resolve_path,
)
from .specification import Specification

__all__ = [
    "AllOf",
    "AnyOf",
    "Criterion",
    "Expression",
    "MatchAll",
    "Not",
    "Operator",
    "Specification",
    "SpecificationEvaluator",
    "eq",
    "is_in",
    "is_null",
    "ne",
    "resolve_path",
]
