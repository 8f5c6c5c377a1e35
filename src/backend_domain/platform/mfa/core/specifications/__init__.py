"""MFA specifications."""

from .mfa_specifications import (
    enabled_mfa_methods_for_user,
    mfa_method_for_user_and_type,
    mfa_methods_for_user,
)

__all__ = [
    "enabled_mfa_methods_for_user",
    "mfa_method_for_user_and_type",
    "mfa_methods_for_user",
]
