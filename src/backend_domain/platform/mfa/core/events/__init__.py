"""MFA domain events."""

from .mfa_method_disabled import MfaMethodDisabledEvent
from .mfa_method_enabled import MfaMethodEnabledEvent

__all__ = ["MfaMethodDisabledEvent", "MfaMethodEnabledEvent"]
