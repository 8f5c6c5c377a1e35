"""Customer specifications."""

from .customer_specifications import (
    active_customers,
    customer_by_email,
    customers_by_application_user,
    customers_by_status,
    premium_customers,
)

__all__ = [
    "active_customers",
    "customer_by_email",
    "customers_by_application_user",
    "customers_by_status",
    "premium_customers",
]
