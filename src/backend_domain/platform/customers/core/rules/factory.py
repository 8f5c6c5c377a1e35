"""Named rule sets per customer use case.

Every set starts with the baseline lifecycle pair (must be active, must not
be deleted). Optional contact data narrows which extra rules apply; its
absence never breaks a rule on its own.
"""

from enum import Enum
from typing import TYPE_CHECKING, Callable, Dict, List

from .....config.constants import RuleMessages
from .....core.rules import (
    BusinessRule,
    CompositeBusinessRule,
    EmailMustBeBusinessEmailRule,
    EmailMustNotBeDisposableRule,
    PhoneNumberMustBeFromTehranRule,
    PhoneNumberMustBeMobileRule,
)
from .customer_rules import (
    CustomerMustBeActiveRule,
    CustomerMustBeAdultRule,
    CustomerMustBeVerifiedForPremiumRule,
    CustomerMustHaveValidContactInfoRule,
    CustomerMustNotBeDeletedRule,
)

if TYPE_CHECKING:
    from ..entities import Customer


class CustomerOperation(str, Enum):
    """Use cases with a dedicated rule set."""

    PLACE_ORDER = "place_order"
    PREMIUM_UPGRADE = "premium_upgrade"
    SMS_NOTIFICATION = "sms_notification"
    EMAIL_NOTIFICATION = "email_notification"
    BUSINESS_ACCOUNT = "business_account"
    LOCAL_SERVICE = "local_service"


class CustomerBusinessRulesFactory:
    """Builds ordered rule lists and composites for customer use cases."""

    @staticmethod
    def baseline_lifecycle_rules(customer: 'Customer', operation: str) -> List[BusinessRule]:
        return [
            CustomerMustBeActiveRule(customer, operation),
            CustomerMustNotBeDeletedRule(customer, operation),
        ]

    @staticmethod
    def create_order_placement_rules(customer: 'Customer') -> List[BusinessRule]:
        operation = "place order"
        return [
            CustomerMustBeActiveRule(customer, operation),
            CustomerMustBeAdultRule(customer, operation),
            CustomerMustHaveValidContactInfoRule(customer, operation),
            CustomerMustNotBeDeletedRule(customer, operation),
        ]

    @staticmethod
    def create_premium_upgrade_rules(customer: 'Customer') -> List[BusinessRule]:
        operation = "upgrade to premium"
        return [
            CustomerMustBeActiveRule(customer, operation),
            CustomerMustBeVerifiedForPremiumRule(customer),
            CustomerMustNotBeDeletedRule(customer, operation),
        ]

    @staticmethod
    def create_sms_notification_rules(customer: 'Customer') -> List[BusinessRule]:
        rules = CustomerBusinessRulesFactory.baseline_lifecycle_rules(customer, "receive SMS")
        if customer.mobile_number is not None:
            rules.append(PhoneNumberMustBeMobileRule(customer.mobile_number, "SMS notification"))
        return rules

    @staticmethod
    def create_email_notification_rules(customer: 'Customer') -> List[BusinessRule]:
        rules = CustomerBusinessRulesFactory.baseline_lifecycle_rules(customer, "receive email")
        if customer.email is not None:
            rules.append(EmailMustNotBeDisposableRule(customer.email, "email notification"))
        return rules

    @staticmethod
    def create_business_account_rules(customer: 'Customer') -> List[BusinessRule]:
        rules = CustomerBusinessRulesFactory.baseline_lifecycle_rules(customer, "business account operations")
        if customer.email is not None:
            rules.append(EmailMustBeBusinessEmailRule(customer.email, "business account"))
        return rules

    @staticmethod
    def create_local_service_rules(customer: 'Customer') -> List[BusinessRule]:
        rules = CustomerBusinessRulesFactory.baseline_lifecycle_rules(customer, "local service")
        # Mobile number takes precedence over the landline
        number = customer.mobile_number or customer.phone_number
        if number is not None:
            rules.append(PhoneNumberMustBeFromTehranRule(number, "local service"))
        return rules

    @staticmethod
    def create_composite_order_rules(customer: 'Customer') -> CompositeBusinessRule:
        return CompositeBusinessRule(
            CustomerBusinessRulesFactory.create_order_placement_rules(customer),
            summary_message=RuleMessages.ORDER_PLACEMENT,
        )

    @staticmethod
    def create_composite_premium_rules(customer: 'Customer') -> CompositeBusinessRule:
        return CompositeBusinessRule(
            CustomerBusinessRulesFactory.create_premium_upgrade_rules(customer),
            summary_message=RuleMessages.PREMIUM_UPGRADE,
        )

    @classmethod
    def create_rules(cls, customer: 'Customer', operation: CustomerOperation) -> List[BusinessRule]:
        """Dispatch to the rule set registered for ``operation``."""
        builder = _RULE_BUILDERS[CustomerOperation(operation)]
        return builder(customer)

    @classmethod
    def create_composite_rules(cls, customer: 'Customer', operation: CustomerOperation) -> CompositeBusinessRule:
        operation = CustomerOperation(operation)
        return CompositeBusinessRule(
            cls.create_rules(customer, operation),
            summary_message=_SUMMARY_MESSAGES[operation],
        )


_RULE_BUILDERS: Dict[CustomerOperation, Callable[['Customer'], List[BusinessRule]]] = {
    CustomerOperation.PLACE_ORDER: CustomerBusinessRulesFactory.create_order_placement_rules,
    CustomerOperation.PREMIUM_UPGRADE: CustomerBusinessRulesFactory.create_premium_upgrade_rules,
    CustomerOperation.SMS_NOTIFICATION: CustomerBusinessRulesFactory.create_sms_notification_rules,
    CustomerOperation.EMAIL_NOTIFICATION: CustomerBusinessRulesFactory.create_email_notification_rules,
    CustomerOperation.BUSINESS_ACCOUNT: CustomerBusinessRulesFactory.create_business_account_rules,
    CustomerOperation.LOCAL_SERVICE: CustomerBusinessRulesFactory.create_local_service_rules,
}

_SUMMARY_MESSAGES: Dict[CustomerOperation, str] = {
    CustomerOperation.PLACE_ORDER: RuleMessages.ORDER_PLACEMENT,
    CustomerOperation.PREMIUM_UPGRADE: RuleMessages.PREMIUM_UPGRADE,
    CustomerOperation.SMS_NOTIFICATION: RuleMessages.SMS_NOTIFICATION,
    CustomerOperation.EMAIL_NOTIFICATION: RuleMessages.EMAIL_NOTIFICATION,
    CustomerOperation.BUSINESS_ACCOUNT: RuleMessages.BUSINESS_ACCOUNT,
    CustomerOperation.LOCAL_SERVICE: RuleMessages.LOCAL_SERVICE,
}
