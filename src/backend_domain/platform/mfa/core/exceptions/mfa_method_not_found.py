"""MFA method not found exception."""

from typing import Any

from .....core.exceptions import ResourceNotFoundError


class MfaMethodNotFoundError(ResourceNotFoundError):
    def __init__(self, mfa_method_id: Any):
        super().__init__("MfaMethod", str(mfa_method_id))
        self.mfa_method_id = mfa_method_id
