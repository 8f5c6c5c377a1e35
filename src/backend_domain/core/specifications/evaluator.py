"""In-memory evaluation of specifications."""

from typing import Any, Iterable, List, Optional, TypeVar

from .expressions import resolve_path
from .specification import Specification

T = TypeVar("T")


def _sort_key(path: str):
    def key(item: Any):
        value = resolve_path(item, path)
        value = getattr(value, "value", value)
        # None sorts first
        return (value is not None, value)
    return key


class SpecificationEvaluator:
    """Filter, order and page plain Python collections."""

    @staticmethod
    def apply(items: Iterable[T], specification: Specification) -> List[T]:
        result = SpecificationEvaluator.filter(items, specification)

        # Stable sorts: apply the secondary (descending) key first.
        if specification.order_by_descending:
            result.sort(key=_sort_key(specification.order_by_descending), reverse=True)
        if specification.order_by:
            result.sort(key=_sort_key(specification.order_by))

        if specification.is_paging_enabled:
            result = result[specification.skip:specification.skip + specification.take]
        return result

    @staticmethod
    def filter(items: Iterable[T], specification: Specification) -> List[T]:
        expression = specification.to_expression()
        return [item for item in items if expression.evaluate(item)]

    @staticmethod
    def count(items: Iterable[T], specification: Specification) -> int:
        """Number of matches, ignoring paging."""
        return len(SpecificationEvaluator.filter(items, specification))

    @staticmethod
    def first(items: Iterable[T], specification: Specification) -> Optional[T]:
        matches = SpecificationEvaluator.apply(items, specification)
        return matches[0] if matches else None
