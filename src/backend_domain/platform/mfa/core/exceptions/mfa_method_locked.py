"""MFA method locked exception."""

from datetime import datetime
from typing import Any, Optional

from .....core.exceptions import InvalidOperationError


class MfaMethodLockedError(InvalidOperationError):
    """Raised when an attempt is made against a locked MFA method."""

    def __init__(self, mfa_method_id: Any, locked_until: Optional[datetime]):
        super().__init__(
            message=f"MFA method {mfa_method_id} is locked until {locked_until.isoformat() if locked_until else 'unknown'}",
            error_code="MFA_METHOD_LOCKED",
            details={
                "mfa_method_id": str(mfa_method_id),
                "locked_until": locked_until.isoformat() if locked_until else None,
            }
        )
        self.mfa_method_id = mfa_method_id
        self.locked_until = locked_until
