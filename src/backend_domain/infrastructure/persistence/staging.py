"""Write staging shared by repository implementations."""

from typing import Any, Dict, Generic, List, TypeVar

from ...core.exceptions import InvalidOperationError

T = TypeVar("T")


class StagedRepository(Generic[T]):
    """Tracks aggregates passed to ``add``, ``update`` and ``delete``.

    Subclasses implement ``save_changes`` and call ``_clear_staged`` once
    the staged writes are durable.
    """

    aggregate_type: str = "Aggregate"

    def __init__(self):
        self._staged: Dict[Any, T] = {}

    async def add(self, aggregate: T) -> None:
        if not aggregate.meta.is_new:
            raise InvalidOperationError(
                f"{self.aggregate_type} {aggregate.id} is already persisted; use update()"
            )
        self._staged[aggregate.id] = aggregate

    async def update(self, aggregate: T) -> None:
        self._staged[aggregate.id] = aggregate

    async def delete(self, aggregate: T) -> None:
        """Stage a soft delete; the aggregate must already be flagged deleted."""
        if not aggregate.meta.is_deleted:
            raise InvalidOperationError(
                f"{self.aggregate_type} {aggregate.id} must be marked deleted before it is removed"
            )
        self._staged[aggregate.id] = aggregate

    def tracked_aggregates(self) -> List[T]:
        return list(self._staged.values())

    def discard_changes(self) -> None:
        self._staged.clear()

    def _clear_staged(self) -> None:
        self._staged.clear()
