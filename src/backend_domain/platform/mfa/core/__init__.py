"""MFA domain core."""

from .entities import MfaMethod
from .events import MfaMethodDisabledEvent, MfaMethodEnabledEvent
from .exceptions import MfaMethodLockedError, MfaMethodNotFoundError
from .protocols import MfaMethodRepository
from .value_objects import MfaType

__all__ = [
    "MfaMethod",
    "MfaMethodDisabledEvent",
    "MfaMethodEnabledEvent",
    "MfaMethodLockedError",
    "MfaMethodNotFoundError",
    "MfaMethodRepository",
    "MfaType",
]
