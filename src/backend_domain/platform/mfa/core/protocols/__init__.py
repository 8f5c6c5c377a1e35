"""MFA protocols."""

from .mfa_method_repository import MfaMethodRepository

__all__ = ["MfaMethodRepository"]
