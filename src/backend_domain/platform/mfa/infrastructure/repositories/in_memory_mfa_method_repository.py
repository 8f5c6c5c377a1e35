"""In-memory MFA method repository."""

from typing import List

from .....infrastructure.persistence import InMemoryRepository
from ...core.entities import MfaMethod
from ...core.specifications import mfa_methods_for_user


class InMemoryMfaMethodRepository(InMemoryRepository[MfaMethod]):
    aggregate_type = "MfaMethod"

    async def get_for_user(self, user_id: str) -> List[MfaMethod]:
        return await self.find(mfa_methods_for_user(user_id))
