"""Business rules over the Customer aggregate.

Rules read facts exposed by the aggregate and never mutate it.
"""

from typing import TYPE_CHECKING

from .....config.constants import CustomerLimits
from .....core.rules import BaseBusinessRule
from ..value_objects import CustomerStatus

if TYPE_CHECKING:
    from ..entities import Customer


class _CustomerRule(BaseBusinessRule):
    def __init__(self, customer: 'Customer', operation: str = "operation"):
        self._customer = customer
        self._operation = operation

    @property
    def _status(self) -> str:
        return self._customer.customer_status.value


class CustomerMustBeActiveRule(_CustomerRule):
    def is_broken(self) -> bool:
        return not self._customer.is_active

    @property
    def message(self) -> str:
        return f"Customer must be active to perform {self._operation}, Customer status: {self._status}"


class CustomerMustBeAdultRule(_CustomerRule):
    def is_broken(self) -> bool:
        return not self._customer.is_adult

    @property
    def message(self) -> str:
        return (
            f"Customer must be adult ({CustomerLimits.ADULT_AGE}+) to perform {self._operation}. "
            f"Current age: {self._customer.age or 0}"
        )


class CustomerMustBeVerifiedForPremiumRule(_CustomerRule):
    """Premium upgrades are only open to verified customers."""

    def __init__(self, customer: 'Customer', operation: str = "upgrade to premium"):
        super().__init__(customer, operation)

    def is_broken(self) -> bool:
        return self._customer.customer_status != CustomerStatus.VERIFIED

    @property
    def message(self) -> str:
        return f"Customer must be verified before upgrading to premium. Current status: {self._status}"


class CustomerMustHaveValidContactInfoRule(_CustomerRule):
    def is_broken(self) -> bool:
        return not self._customer.has_valid_contact_info()

    @property
    def message(self) -> str:
        return (
            "Customer must have valid contact information (email and phone/mobile) "
            f"to perform {self._operation}"
        )


class CustomerMustNotBeDeletedRule(_CustomerRule):
    def is_broken(self) -> bool:
        return self._customer.is_deleted

    @property
    def message(self) -> str:
        return f"Cannot perform {self._operation} on deleted customer, Customer status: {self._status}"
