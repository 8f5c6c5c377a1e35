"""Customer business rules and rule factory."""

from .customer_rules import (
    CustomerMustBeActiveRule,
    CustomerMustBeAdultRule,
    CustomerMustBeVerifiedForPremiumRule,
    CustomerMustHaveValidContactInfoRule,
    CustomerMustNotBeDeletedRule,
)
from .factory import CustomerBusinessRulesFactory, CustomerOperation

__all__ = [
    "CustomerMustBeActiveRule",
    "CustomerMustBeAdultRule",
    "CustomerMustBeVerifiedForPremiumRule",
    "CustomerMustHaveValidContactInfoRule",
    "CustomerMustNotBeDeletedRule",
    "CustomerBusinessRulesFactory",
    "CustomerOperation",
]
