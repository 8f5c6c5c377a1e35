"""Customer queries."""

from .list_customers import CustomerPage, ListCustomersQuery, ListCustomersQueryHandler
from .validate_customer_operation import (
    RuleValidationResult,
    ValidateCustomerOperationQuery,
    ValidateCustomerOperationQueryHandler,
)

__all__ = [
    "CustomerPage",
    "ListCustomersQuery",
    "ListCustomersQueryHandler",
    "RuleValidationResult",
    "ValidateCustomerOperationQuery",
    "ValidateCustomerOperationQueryHandler",
]
