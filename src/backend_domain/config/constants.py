"""Constants for backend-domain.

Fixed domain limits and persistence names shared by the aggregates,
rules and repositories. Tunable values live in settings instead.
"""

from typing import Final


class MfaLimits:
    """Attempt tracking limits for MFA methods."""

    MAX_FAILED_ATTEMPTS: Final[int] = 5
    LOCKOUT_MINUTES: Final[int] = 15


class CustomerLimits:
    """Customer policy thresholds."""

    ADULT_AGE: Final[int] = 18


class RuleMessages:
    """Default summary messages for composite business rules."""

    DEFAULT_COMPOSITE: Final[str] = "One or more business rules are broken"
    ORDER_PLACEMENT: Final[str] = "Order placement validation failed"
    PREMIUM_UPGRADE: Final[str] = "Premium upgrade validation failed"
    SMS_NOTIFICATION: Final[str] = "SMS notification validation failed"
    EMAIL_NOTIFICATION: Final[str] = "Email notification validation failed"
    BUSINESS_ACCOUNT: Final[str] = "Business account validation failed"
    LOCAL_SERVICE: Final[str] = "Local service validation failed"


class DatabaseTables:
    """Table names used by the asyncpg repositories."""

    SCHEMA: Final[str] = "domain"
    CUSTOMERS: Final[str] = "customers"
    MFA_METHODS: Final[str] = "mfa_methods"
