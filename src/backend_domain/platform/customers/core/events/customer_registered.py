"""Customer registration event."""

from dataclasses import dataclass
from typing import Optional

from .....core.events import DomainEvent
from .....core.value_objects import CustomerId


@dataclass(frozen=True)
class CustomerRegisteredEvent(DomainEvent):
    """Event fired when a new customer aggregate is created."""

    EVENT_TYPE = "customer.registered"

    customer_id: CustomerId
    application_user_id: Optional[str] = None
