"""Aggregate metadata shared by every aggregate root.

Aggregates do not inherit identity, audit and versioning behaviour; they
hold an ``AggregateMetadata`` instance in their ``meta`` attribute and
delegate to it.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, List, Optional, Protocol, Tuple, runtime_checkable

from ..events import DomainEvent
from ...utils import utc_now


@dataclass
class AggregateMetadata:
    """Identity, audit stamps, optimistic-concurrency version and pending events."""

    id: Any
    created_at: datetime = field(default_factory=utc_now)
    created_by: Optional[str] = None
    updated_at: Optional[datetime] = None
    updated_by: Optional[str] = None
    is_deleted: bool = False
    deleted_at: Optional[datetime] = None
    deleted_by: Optional[str] = None
    version: int = 0
    # Version as last loaded from or written to storage
    persisted_version: int = 0
    _events: List[DomainEvent] = field(default_factory=list, repr=False, compare=False)

    @property
    def is_new(self) -> bool:
        return self.persisted_version == 0

    @property
    def is_dirty(self) -> bool:
        return self.version != self.persisted_version

    def record_created(self, by: Optional[str] = None) -> None:
        self.created_at = utc_now()
        self.created_by = by
        self.version += 1

    def record_updated(self, by: Optional[str] = None) -> None:
        self.updated_at = utc_now()
        self.updated_by = by
        self.version += 1

    def record_deleted(self, by: Optional[str] = None) -> None:
        now = utc_now()
        self.is_deleted = True
        self.deleted_at = now
        self.deleted_by = by
        self.updated_at = now
        self.updated_by = by
        self.version += 1

    def record_event(self, event: DomainEvent) -> DomainEvent:
        self._events.append(event)
        return event

    @property
    def pending_events(self) -> Tuple[DomainEvent, ...]:
        return tuple(self._events)

    def pull_events(self) -> List[DomainEvent]:
        """Drain the pending queue. A second call returns an empty list."""
        events, self._events = self._events, []
        return events

    def mark_persisted(self) -> None:
        self.persisted_version = self.version


@runtime_checkable
class AggregateRoot(Protocol):
    """Anything that exposes aggregate metadata."""

    meta: AggregateMetadata

    @property
    def id(self) -> Any:
        ...


class AggregateIdentityMixin:
    """Equality and hashing by aggregate id."""

    meta: AggregateMetadata

    @property
    def id(self) -> Any:
        return self.meta.id

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, type(self)):
            return NotImplemented
        return self.meta.id == other.meta.id

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.meta.id))
