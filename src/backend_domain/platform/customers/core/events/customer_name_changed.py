"""Customer name change event."""

from dataclasses import dataclass
from typing import Optional

from .....core.events import DomainEvent
from .....core.value_objects import CustomerId


@dataclass(frozen=True)
class CustomerNameChangedEvent(DomainEvent):
    EVENT_TYPE = "customer.name_changed"

    customer_id: CustomerId
    new_full_name: str
    previous_full_name: Optional[str] = None
