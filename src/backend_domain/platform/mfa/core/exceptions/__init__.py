"""MFA exceptions."""

from .mfa_method_locked import MfaMethodLockedError
from .mfa_method_not_found import MfaMethodNotFoundError

__all__ = ["MfaMethodLockedError", "MfaMethodNotFoundError"]
