"""Shared aggregate loading for MFA command handlers."""

from typing import Any

from .....core.exceptions import InvalidOperationError
from ...core.entities import MfaMethod
from ...core.exceptions import MfaMethodLockedError, MfaMethodNotFoundError
from ...core.protocols import MfaMethodRepository


async def load_mfa_method(repository: MfaMethodRepository, mfa_method_id: Any) -> MfaMethod:
    method = await repository.get_by_id(mfa_method_id)
    if method is None:
        raise MfaMethodNotFoundError(mfa_method_id)
    return method


def ensure_can_attempt(method: MfaMethod) -> None:
    """Attempts need an enabled, unlocked method."""
    if not method.is_enabled:
        raise InvalidOperationError(f"MFA method {method.id} is not enabled")
    if method.is_locked():
        raise MfaMethodLockedError(method.id, method.locked_until)
