"""Reusable customer query specifications."""

from typing import Union

from .....core.specifications import Criterion, Operator, Specification, eq, is_in
from .....core.value_objects import Email
from ..value_objects import CustomerStatus

_NOT_DELETED = eq("meta.is_deleted", False)


def customers_by_status(status: CustomerStatus) -> Specification:
    return Specification().where(eq("customer_status", CustomerStatus(status))).where(_NOT_DELETED)


def active_customers() -> Specification:
    """Customers in any operational status, newest first."""
    return (
        Specification()
        .where(is_in("customer_status", CustomerStatus.operational()))
        .where(_NOT_DELETED)
        .add_order_by_descending("meta.created_at")
    )


def customer_by_email(email: Union[str, Email]) -> Specification:
    return Specification().where(eq("email.value", Email.of(email).value)).where(_NOT_DELETED)


def premium_customers() -> Specification:
    return customers_by_status(CustomerStatus.PREMIUM).add_order_by("last_name")


def customers_by_application_user(application_user_id: str) -> Specification:
    return Specification().where(Criterion("application_user_id", Operator.EQ, application_user_id))
