"""Customer exceptions."""

from .customer_not_found import CustomerNotFoundError

__all__ = ["CustomerNotFoundError"]
