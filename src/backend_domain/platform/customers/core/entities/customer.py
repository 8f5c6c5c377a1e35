"""Customer aggregate root.

This module defines the Customer aggregate and its lifecycle. Every
mutation is refused once the customer is deleted, bumps the aggregate
version exactly once and returns the domain events it raised (the same
events are also queued on ``meta`` for dispatch by the unit of work).
"""

from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, List, Optional, Union

from .....core.entities import AggregateIdentityMixin, AggregateMetadata
from .....core.events import DomainEvent
from .....core.exceptions import DomainValidationError
from .....core.rules import BusinessRuleValidator
from .....core.shared import guard
from .....core.value_objects import Address, CustomerId, Email, NationalCode, PhoneNumber
from .....config.constants import CustomerLimits
from .....utils import utc_now, years_between
from ..events import CustomerNameChangedEvent, CustomerRegisteredEvent, CustomerStatusChangedEvent
from ..rules import CustomerBusinessRulesFactory, CustomerMustNotBeDeletedRule
from ..value_objects import CustomerStatus, Gender


@dataclass(eq=False)
class Customer(AggregateIdentityMixin):
    """Customer aggregate root.

    Identity, audit stamps and version live in ``meta``; equality is by id.
    Status rules are evaluated before status changes; entity facts such as
    ``is_adult`` and ``has_valid_contact_info`` are interpreted by rules,
    not enforced here.
    """

    meta: AggregateMetadata
    application_user_id: str
    first_name: str
    last_name: str

    # Personal information
    middle_name: Optional[str] = None
    date_of_birth: Optional[date] = None
    gender: Optional[Gender] = None
    national_code: Optional[NationalCode] = None
    passport_number: Optional[str] = None
    primary_address: Optional[Address] = None

    # Contact information
    email: Optional[Email] = None
    phone_number: Optional[PhoneNumber] = None
    mobile_number: Optional[PhoneNumber] = None

    # Business information
    customer_status: CustomerStatus = CustomerStatus.PENDING
    company_name: Optional[str] = None
    tax_id: Optional[str] = None

    @classmethod
    def create(
        cls,
        application_user_id: str,
        first_name: str,
        last_name: str,
        created_by: Optional[str] = None,
        customer_id: Optional[CustomerId] = None,
    ) -> 'Customer':
        """Register a new customer in Pending status (version 1)."""
        guard.against_null_or_empty(application_user_id, "application_user_id")
        guard.against_null_or_empty(first_name, "first_name")
        guard.against_null_or_empty(last_name, "last_name")

        customer = cls(
            meta=AggregateMetadata(id=customer_id or CustomerId.generate()),
            application_user_id=application_user_id,
            first_name=first_name.strip(),
            last_name=last_name.strip(),
        )
        customer.meta.record_created(created_by)
        customer._raise(CustomerRegisteredEvent(customer.id, application_user_id))
        return customer

    # Computed properties

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    @property
    def display_name(self) -> str:
        if self.middle_name:
            return f"{self.first_name} {self.middle_name} {self.last_name}"
        return self.full_name

    @property
    def age(self) -> Optional[int]:
        if self.date_of_birth is None:
            return None
        return years_between(self.date_of_birth, utc_now().date())

    @property
    def is_adult(self) -> bool:
        age = self.age
        return age is not None and age >= CustomerLimits.ADULT_AGE

    @property
    def is_deleted(self) -> bool:
        return self.meta.is_deleted or self.customer_status is CustomerStatus.DELETED

    @property
    def is_active(self) -> bool:
        """True in any operational status (active, verified, premium, regular)."""
        return not self.is_deleted and self.customer_status in CustomerStatus.operational()

    @property
    def is_verified(self) -> bool:
        return self.customer_status is CustomerStatus.VERIFIED

    @property
    def is_premium(self) -> bool:
        return self.customer_status is CustomerStatus.PREMIUM

    @property
    def version(self) -> int:
        return self.meta.version

    # Queries used by rules

    def has_valid_contact_info(self) -> bool:
        return self.email is not None and (self.phone_number is not None or self.mobile_number is not None)

    def has_complete_profile(self) -> bool:
        return self.email is not None and self.mobile_number is not None and self.primary_address is not None

    def can_place_order(self) -> bool:
        return self.is_active and self.is_adult and self.email is not None

    def can_access_premium_features(self) -> bool:
        return self.is_active and self.is_premium

    # Personal information

    def change_name(self, first_name: str, last_name: str, updated_by: str) -> List[DomainEvent]:
        self._ensure_mutable("change name", updated_by)
        guard.against_null_or_empty(first_name, "first_name")
        guard.against_null_or_empty(last_name, "last_name")

        previous_full_name = self.full_name
        self.first_name = first_name.strip()
        self.last_name = last_name.strip()
        self.meta.record_updated(updated_by)
        return [self._raise(CustomerNameChangedEvent(self.id, self.full_name, previous_full_name))]

    def set_middle_name(self, middle_name: Optional[str], updated_by: str) -> List[DomainEvent]:
        self._ensure_mutable("set middle name", updated_by)
        self.middle_name = _blank_to_none(middle_name)
        return self._touch(updated_by)

    def set_date_of_birth(self, date_of_birth: Optional[date], updated_by: str) -> List[DomainEvent]:
        self._ensure_mutable("set date of birth", updated_by)
        guard.against(
            date_of_birth is not None and date_of_birth > utc_now().date(),
            "Date of birth cannot be in the future",
            "date_of_birth",
        )
        self.date_of_birth = date_of_birth
        return self._touch(updated_by)

    def set_gender(self, gender: Optional[Union[str, Gender]], updated_by: str) -> List[DomainEvent]:
        self._ensure_mutable("set gender", updated_by)
        if gender is None or isinstance(gender, Gender):
            self.gender = gender
        elif not gender.strip():
            self.gender = None
        else:
            try:
                self.gender = Gender.parse(gender)
            except ValueError:
                raise DomainValidationError("Invalid gender value", field_name="gender")
        return self._touch(updated_by)

    def set_national_code(self, national_code: Optional[Union[str, NationalCode]], updated_by: str) -> List[DomainEvent]:
        self._ensure_mutable("set national code", updated_by)
        if isinstance(national_code, str):
            national_code = NationalCode(national_code) if national_code.strip() else None
        self.national_code = national_code
        return self._touch(updated_by)

    def set_passport_number(self, passport_number: Optional[str], updated_by: str) -> List[DomainEvent]:
        self._ensure_mutable("set passport number", updated_by)
        self.passport_number = _blank_to_none(passport_number)
        return self._touch(updated_by)

    # Contact information

    def set_email(self, email: Optional[Union[str, Email]], updated_by: str) -> List[DomainEvent]:
        self._ensure_mutable("set email", updated_by)
        self.email = _optional_value(email, Email)
        return self._touch(updated_by)

    def set_phone_number(self, phone_number: Optional[Union[str, PhoneNumber]], updated_by: str) -> List[DomainEvent]:
        self._ensure_mutable("set phone number", updated_by)
        self.phone_number = _optional_value(phone_number, PhoneNumber)
        return self._touch(updated_by)

    def set_mobile_number(self, mobile_number: Optional[Union[str, PhoneNumber]], updated_by: str) -> List[DomainEvent]:
        self._ensure_mutable("set mobile number", updated_by)
        self.mobile_number = _optional_value(mobile_number, PhoneNumber)
        return self._touch(updated_by)

    def set_primary_address(self, address: Optional[Address], updated_by: str) -> List[DomainEvent]:
        self._ensure_mutable("set primary address", updated_by)
        self.primary_address = address
        return self._touch(updated_by)

    # Business information

    def set_company_name(self, company_name: Optional[str], updated_by: str) -> List[DomainEvent]:
        self._ensure_mutable("set company name", updated_by)
        self.company_name = _blank_to_none(company_name)
        return self._touch(updated_by)

    def set_tax_id(self, tax_id: Optional[str], updated_by: str) -> List[DomainEvent]:
        self._ensure_mutable("set tax id", updated_by)
        self.tax_id = _blank_to_none(tax_id)
        return self._touch(updated_by)

    # Status transitions

    def activate(self, activated_by: str) -> List[DomainEvent]:
        self._ensure_mutable("activate", activated_by)
        return self._change_status(CustomerStatus.ACTIVE, activated_by)

    def deactivate(self, deactivated_by: str) -> List[DomainEvent]:
        self._ensure_mutable("deactivate", deactivated_by)
        return self._change_status(CustomerStatus.INACTIVE, deactivated_by)

    def suspend(self, suspended_by: str, reason: Optional[str] = None) -> List[DomainEvent]:
        self._ensure_mutable("suspend", suspended_by)
        return self._change_status(CustomerStatus.SUSPENDED, suspended_by, reason)

    def block(self, blocked_by: str, reason: Optional[str] = None) -> List[DomainEvent]:
        self._ensure_mutable("block", blocked_by)
        return self._change_status(CustomerStatus.BLOCKED, blocked_by, reason)

    def verify(self, verified_by: str) -> List[DomainEvent]:
        self._ensure_mutable("verify", verified_by)
        return self._change_status(CustomerStatus.VERIFIED, verified_by)

    def upgrade_to_premium(self, upgraded_by: str) -> List[DomainEvent]:
        self._ensure_mutable("upgrade to premium", upgraded_by)
        BusinessRuleValidator.validate(CustomerBusinessRulesFactory.create_premium_upgrade_rules(self))
        return self._change_status(CustomerStatus.PREMIUM, upgraded_by)

    def downgrade_to_regular(self, downgraded_by: str) -> List[DomainEvent]:
        self._ensure_mutable("downgrade to regular", downgraded_by)
        return self._change_status(CustomerStatus.REGULAR, downgraded_by)

    def delete(self, deleted_by: str, reason: Optional[str] = None) -> List[DomainEvent]:
        """Soft-delete the customer. Deleted is terminal."""
        self._ensure_mutable("delete", deleted_by)
        previous_status = self.customer_status
        self.customer_status = CustomerStatus.DELETED
        self.meta.record_deleted(deleted_by)
        event = CustomerStatusChangedEvent(self.id, CustomerStatus.DELETED, previous_status, reason)
        return [self._raise(event)]

    # Internals

    def _ensure_mutable(self, operation: str, actor: str) -> None:
        guard.against_null_or_empty(actor, "updated_by")
        CustomerMustNotBeDeletedRule(self, operation).validate()

    def _touch(self, updated_by: str) -> List[DomainEvent]:
        self.meta.record_updated(updated_by)
        return []

    def _raise(self, event: DomainEvent) -> DomainEvent:
        return self.meta.record_event(event)

    def _change_status(
        self,
        new_status: CustomerStatus,
        changed_by: str,
        reason: Optional[str] = None,
    ) -> List[DomainEvent]:
        # Re-entering the current status changes nothing
        if self.customer_status is new_status:
            return []

        previous_status = self.customer_status
        self.customer_status = new_status
        self.meta.record_updated(changed_by)
        return [self._raise(CustomerStatusChangedEvent(self.id, new_status, previous_status, reason))]

    def to_dict(self) -> Dict[str, Any]:
        """Convert customer to dictionary representation."""
        return {
            "id": str(self.id),
            "application_user_id": self.application_user_id,
            "first_name": self.first_name,
            "last_name": self.last_name,
            "middle_name": self.middle_name,
            "full_name": self.full_name,
            "date_of_birth": self.date_of_birth.isoformat() if self.date_of_birth else None,
            "gender": self.gender.value if self.gender else None,
            "national_code": self.national_code.value if self.national_code else None,
            "passport_number": self.passport_number,
            "primary_address": self.primary_address.full_address if self.primary_address else None,
            "email": self.email.value if self.email else None,
            "phone_number": self.phone_number.value if self.phone_number else None,
            "mobile_number": self.mobile_number.value if self.mobile_number else None,
            "customer_status": self.customer_status.value,
            "company_name": self.company_name,
            "tax_id": self.tax_id,
            "is_active": self.is_active,
            "is_deleted": self.is_deleted,
            "version": self.meta.version,
            "created_at": self.meta.created_at.isoformat(),
            "updated_at": self.meta.updated_at.isoformat() if self.meta.updated_at else None,
        }

    def __str__(self) -> str:
        return f"Customer({self.id}, {self.full_name}, {self.customer_status.value})"

    def __repr__(self) -> str:
        return (
            f"Customer(id={self.id}, application_user_id={self.application_user_id}, "
            f"status={self.customer_status.value}, version={self.meta.version})"
        )


def _blank_to_none(value: Optional[str]) -> Optional[str]:
    if value is None or not value.strip():
        return None
    return value.strip()


def _optional_value(value, factory):
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    return factory.of(value)
