"""Repository protocol contract."""

from typing import Any, Generic, List, Optional, Protocol, Sequence, Tuple, TypeVar, runtime_checkable

from ..specifications import Specification

T = TypeVar("T")


@runtime_checkable
class Repository(Protocol, Generic[T]):
    """Protocol for aggregate persistence.

    Defines ONLY the contract. Writes are staged by ``add``, ``update`` and
    ``delete`` and applied by ``save_changes`` with an optimistic version
    check per aggregate.
    """

    async def get_by_id(self, aggregate_id: Any) -> Optional[T]:
        """Load an aggregate by id.

        Args:
            aggregate_id: Aggregate identifier

        Returns:
            The aggregate, or None when it does not exist
        """
        ...

    async def find(self, specification: Specification) -> List[T]:
        """Return every aggregate matching the specification, ordered and paged."""
        ...

    async def find_one(self, specification: Specification) -> Optional[T]:
        ...

    async def count(self, specification: Specification) -> int:
        """Count matches; paging is ignored."""
        ...

    async def get_paged(self, specification: Specification) -> Tuple[List[T], int]:
        """Return one page of matches and the unpaged total."""
        ...

    async def add(self, aggregate: T) -> None:
        ...

    async def update(self, aggregate: T) -> None:
        ...

    async def delete(self, aggregate: T) -> None:
        """Stage a soft-deleted aggregate.

        Raises:
            InvalidOperationError: If the aggregate is not flagged as deleted
        """
        ...

    async def save_changes(self) -> Sequence[T]:
        """Apply staged writes.

        Returns:
            The aggregates that were written

        Raises:
            ConcurrencyConflictError: If a stored version no longer matches
        """
        ...

    def tracked_aggregates(self) -> Sequence[T]:
        """Aggregates currently staged for writing."""
        ...

    def discard_changes(self) -> None:
        """Drop staged writes without applying them."""
        ...
