"""MFA method repository protocol contract."""

from typing import List, Protocol, runtime_checkable

from .....core.protocols import Repository
from ..entities import MfaMethod


@runtime_checkable
class MfaMethodRepository(Repository[MfaMethod], Protocol):
    """Repository of MFA methods."""

    async def get_for_user(self, user_id: str) -> List[MfaMethod]:
        """All methods registered for a user, ordered by type."""
        ...
