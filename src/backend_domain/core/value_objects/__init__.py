"""Shared value objects.

Immutable, self-validating types compared by value. Construction with
invalid input raises DomainValidationError.
"""

from .address import Address
from .audit_info import AuditInfo
from .email import Email
from .identifiers import CustomerId, MfaMethodId
from .national_code import NationalCode
from .phone_number import PhoneNumber

__all__ = [
    "Address",
    "AuditInfo",
    "Email",
    "CustomerId",
    "MfaMethodId",
    "NationalCode",
    "PhoneNumber",
]
