"""Business rule engine."""

from .base import BaseBusinessRule, BusinessRule
from .composite import CompositeBusinessRule
from .contact_rules import (
    EmailMustBeBusinessEmailRule,
    EmailMustNotBeDisposableRule,
    PhoneNumberMustBeFromTehranRule,
    PhoneNumberMustBeMobileRule,
)
from .validator import BusinessRuleValidator

__all__ = [
    "BaseBusinessRule",
    "BusinessRule",
    "CompositeBusinessRule",
    "BusinessRuleValidator",
    "EmailMustBeBusinessEmailRule",
    "EmailMustNotBeDisposableRule",
    "PhoneNumberMustBeFromTehranRule",
    "PhoneNumberMustBeMobileRule",
]
