"""In-memory aggregate persistence.

Aggregates are stored as deep-copied snapshots so callers never share
state with the store. Each ``save_changes`` call checks every staged
version before writing any of them.
"""

import copy
import logging
from typing import Any, Dict, Generic, List, Optional, Tuple, TypeVar

from .staging import StagedRepository
from ...core.exceptions import ConcurrencyConflictError
from ...core.specifications import Specification, SpecificationEvaluator

logger = logging.getLogger(__name__)

T = TypeVar("T")


class InMemoryAggregateStore(Generic[T]):
    """Snapshot store keyed by aggregate id."""

    def __init__(self):
        self._snapshots: Dict[Any, T] = {}

    def version_of(self, aggregate_id: Any) -> Optional[int]:
        snapshot = self._snapshots.get(aggregate_id)
        return snapshot.meta.version if snapshot is not None else None

    def load(self, aggregate_id: Any) -> Optional[T]:
        snapshot = self._snapshots.get(aggregate_id)
        return copy.deepcopy(snapshot) if snapshot is not None else None

    def load_all(self) -> List[T]:
        return [copy.deepcopy(snapshot) for snapshot in self._snapshots.values()]

    def write(self, aggregate: T) -> None:
        snapshot = copy.deepcopy(aggregate)
        snapshot.meta.pull_events()
        snapshot.meta.mark_persisted()
        self._snapshots[snapshot.id] = snapshot

    def __len__(self) -> int:
        return len(self._snapshots)

    def __contains__(self, aggregate_id: Any) -> bool:
        return aggregate_id in self._snapshots


class InMemoryRepository(StagedRepository[T]):
    """Repository over an ``InMemoryAggregateStore``."""

    def __init__(self, store: Optional[InMemoryAggregateStore] = None):
        super().__init__()
        self.store: InMemoryAggregateStore = store if store is not None else InMemoryAggregateStore()

    async def get_by_id(self, aggregate_id: Any) -> Optional[T]:
        return self.store.load(aggregate_id)

    async def find(self, specification: Specification) -> List[T]:
        return SpecificationEvaluator.apply(self.store.load_all(), specification)

    async def find_one(self, specification: Specification) -> Optional[T]:
        return SpecificationEvaluator.first(self.store.load_all(), specification)

    async def count(self, specification: Specification) -> int:
        return SpecificationEvaluator.count(self.store.load_all(), specification)

    async def get_paged(self, specification: Specification) -> Tuple[List[T], int]:
        items = self.store.load_all()
        return SpecificationEvaluator.apply(items, specification), SpecificationEvaluator.count(items, specification)

    async def save_changes(self) -> List[T]:
        staged = self.tracked_aggregates()

        # No awaits between the checks and the writes, so this is atomic per event loop
        for aggregate in staged:
            expected = None if aggregate.meta.is_new else aggregate.meta.persisted_version
            actual = self.store.version_of(aggregate.id)
            if actual != expected:
                logger.warning(
                    f"Concurrency conflict on {self.aggregate_type} {aggregate.id}: "
                    f"expected version {expected}, found {actual}"
                )
                raise ConcurrencyConflictError(self.aggregate_type, aggregate.id, expected, actual)

        for aggregate in staged:
            self.store.write(aggregate)
            aggregate.meta.mark_persisted()

        self._clear_staged()
        logger.debug(f"Saved {len(staged)} {self.aggregate_type} aggregate(s) in memory")
        return staged
