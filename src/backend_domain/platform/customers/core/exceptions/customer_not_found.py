"""Customer not found exception."""

from typing import Any

from .....core.exceptions import ResourceNotFoundError


class CustomerNotFoundError(ResourceNotFoundError):
    """Raised when a customer cannot be loaded by id."""

    def __init__(self, customer_id: Any):
        super().__init__("Customer", str(customer_id))
        self.customer_id = customer_id
