"""Customer domain events."""

from .customer_name_changed import CustomerNameChangedEvent
from .customer_registered import CustomerRegisteredEvent
from .customer_status_changed import CustomerStatusChangedEvent

__all__ = [
    "CustomerNameChangedEvent",
    "CustomerRegisteredEvent",
    "CustomerStatusChangedEvent",
]
