"""Customer value objects."""

from .customer_status import CustomerStatus, Gender

__all__ = ["CustomerStatus", "Gender"]
