"""Customer repository protocol contract."""

from typing import Optional, Protocol, runtime_checkable

from .....core.protocols import Repository
from ..entities import Customer


@runtime_checkable
class CustomerRepository(Repository[Customer], Protocol):
    """Repository of Customer aggregates with a lookup by application user."""

    async def get_by_application_user_id(self, application_user_id: str) -> Optional[Customer]:
        """Load the customer linked to an identity user, if any."""
        ...
