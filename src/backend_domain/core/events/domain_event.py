"""Base type for domain events."""

import itertools
from dataclasses import dataclass, field, fields, is_dataclass
from datetime import datetime
from enum import Enum
from typing import Any, ClassVar, Dict
from uuid import UUID

from ...utils import generate_uuid_v7, utc_now

# Process-wide raise order; the unit of work dispatches by this sequence.
_sequence = itertools.count(1)


def _serialize(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, UUID) or is_dataclass(value):
        # Identifier and other value objects render through __str__
        return str(value)
    if isinstance(value, (list, tuple)):
        return [_serialize(item) for item in value]
    return value


@dataclass(frozen=True)
class DomainEvent:
    """Immutable fact raised by an aggregate.

    Subclasses declare their payload fields and set ``EVENT_TYPE``.
    """

    EVENT_TYPE: ClassVar[str] = "domain_event"

    event_id: UUID = field(default_factory=generate_uuid_v7, kw_only=True)
    occurred_at: datetime = field(default_factory=utc_now, kw_only=True)
    sequence: int = field(default_factory=lambda: next(_sequence), kw_only=True)

    @property
    def event_type(self) -> str:
        return self.EVENT_TYPE

    def to_dict(self) -> Dict[str, Any]:
        """Convert event to a JSON-friendly dictionary."""
        payload = {f.name: _serialize(getattr(self, f.name)) for f in fields(self)}
        payload["event_type"] = self.event_type
        return payload
