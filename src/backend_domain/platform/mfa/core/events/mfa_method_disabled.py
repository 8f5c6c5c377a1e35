"""MFA method disabled event."""

from dataclasses import dataclass

from .....core.events import DomainEvent
from .....core.value_objects import MfaMethodId
from ..value_objects import MfaType


@dataclass(frozen=True)
class MfaMethodDisabledEvent(DomainEvent):
    """Event fired when an enabled MFA method is turned off.

    Failed-attempt counters and any lock are cleared by the same change.
    """

    EVENT_TYPE = "mfa.method_disabled"

    mfa_method_id: MfaMethodId
    user_id: str
    mfa_type: MfaType
