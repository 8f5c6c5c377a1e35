"""MFA entities."""

from .mfa_method import MfaMethod

__all__ = ["MfaMethod"]
