"""MFA method enabled event."""

from dataclasses import dataclass

from .....core.events import DomainEvent
from .....core.value_objects import MfaMethodId
from ..value_objects import MfaType


@dataclass(frozen=True)
class MfaMethodEnabledEvent(DomainEvent):
    EVENT_TYPE = "mfa.method_enabled"

    mfa_method_id: MfaMethodId
    user_id: str
    mfa_type: MfaType
