"""Customer status change event."""

from dataclasses import dataclass
from typing import Optional

from .....core.events import DomainEvent
from .....core.value_objects import CustomerId
from ..value_objects import CustomerStatus


@dataclass(frozen=True)
class CustomerStatusChangedEvent(DomainEvent):
    """Event fired on every successful customer status transition.

    Carries both the new and the previous status so subscribers never need
    to load the aggregate to know what changed.
    """

    EVENT_TYPE = "customer.status_changed"

    customer_id: CustomerId
    new_status: CustomerStatus
    previous_status: Optional[CustomerStatus] = None
    reason: Optional[str] = None
