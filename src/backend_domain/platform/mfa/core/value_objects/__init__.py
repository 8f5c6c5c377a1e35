"""MFA value objects."""

from .mfa_type import MfaType

__all__ = ["MfaType"]
