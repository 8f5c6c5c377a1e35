"""Customer commands."""

from .change_customer_status import (
    ChangeCustomerStatusCommand,
    ChangeCustomerStatusCommandHandler,
    ChangeCustomerStatusResult,
    CustomerStatusAction,
)
from .register_customer import RegisterCustomerCommand, RegisterCustomerCommandHandler
from .update_customer_contact_info import (
    UpdateCustomerContactInfoCommand,
    UpdateCustomerContactInfoCommandHandler,
)

__all__ = [
    "ChangeCustomerStatusCommand",
    "ChangeCustomerStatusCommandHandler",
    "ChangeCustomerStatusResult",
    "CustomerStatusAction",
    "RegisterCustomerCommand",
    "RegisterCustomerCommandHandler",
    "UpdateCustomerContactInfoCommand",
    "UpdateCustomerContactInfoCommandHandler",
]
