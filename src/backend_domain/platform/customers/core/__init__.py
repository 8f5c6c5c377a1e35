"""Customer domain core: aggregate, events, rules, specifications and contracts."""

from .entities import Customer
from .events import CustomerNameChangedEvent, CustomerRegisteredEvent, CustomerStatusChangedEvent
from .exceptions import CustomerNotFoundError
from .protocols import CustomerRepository
from .rules import CustomerBusinessRulesFactory, CustomerOperation
from .value_objects import CustomerStatus, Gender

__all__ = [
    "Customer",
    "CustomerNameChangedEvent",
    "CustomerRegisteredEvent",
    "CustomerStatusChangedEvent",
    "CustomerNotFoundError",
    "CustomerRepository",
    "CustomerBusinessRulesFactory",
    "CustomerOperation",
    "CustomerStatus",
    "Gender",
]
