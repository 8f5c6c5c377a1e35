"""Immutable query specifications.

Every builder step returns a new ``Specification`` so a shared instance can
be refined per request without affecting other callers.
"""

from dataclasses import dataclass, replace
from typing import Any, Optional, Tuple

from .expressions import AllOf, Expression, MatchAll
from ..shared import guard


@dataclass(frozen=True)
class Specification:
    """Filter, includes, ordering and paging for a query.

    At most one ascending and one descending order key are kept; setting a
    key again replaces it.
    """

    criteria: Tuple[Expression, ...] = ()
    includes: Tuple[str, ...] = ()
    order_by: Optional[str] = None
    order_by_descending: Optional[str] = None
    skip: int = 0
    take: Optional[int] = None

    @property
    def is_paging_enabled(self) -> bool:
        return self.take is not None

    def where(self, expression: Expression) -> 'Specification':
        """Add a filter; multiple filters are AND-combined."""
        guard.against_none(expression, "expression")
        return replace(self, criteria=self.criteria + (expression,))

    def add_include(self, include: str) -> 'Specification':
        guard.against_null_or_empty(include, "include")
        if include in self.includes:
            return self
        return replace(self, includes=self.includes + (include,))

    def add_order_by(self, field: str) -> 'Specification':
        return replace(self, order_by=guard.against_null_or_empty(field, "order_by"))

    def add_order_by_descending(self, field: str) -> 'Specification':
        return replace(self, order_by_descending=guard.against_null_or_empty(field, "order_by_descending"))

    def apply_paging(self, skip: int, take: int) -> 'Specification':
        guard.against(skip < 0, "skip cannot be negative", "skip")
        guard.against(take < 1, "take must be at least 1", "take")
        return replace(self, skip=skip, take=take)

    def without_paging(self) -> 'Specification':
        return replace(self, skip=0, take=None)

    def to_expression(self) -> Expression:
        if not self.criteria:
            return MatchAll()
        if len(self.criteria) == 1:
            return self.criteria[0]
        return AllOf(self.criteria)

    def is_satisfied_by(self, entity: Any) -> bool:
        return self.to_expression().evaluate(entity)

    def __and__(self, other: 'Specification') -> 'Specification':
        """Merge filters and includes; ordering and paging come from ``self``."""
        includes = self.includes + tuple(i for i in other.includes if i not in self.includes)
        return replace(self, criteria=self.criteria + other.criteria, includes=includes)
