"""In-memory customer repository."""

from typing import Optional

from .....infrastructure.persistence import InMemoryRepository
from ...core.entities import Customer
from ...core.specifications import customers_by_application_user


class InMemoryCustomerRepository(InMemoryRepository[Customer]):
    aggregate_type = "Customer"

    async def get_by_application_user_id(self, application_user_id: str) -> Optional[Customer]:
        return await self.find_one(customers_by_application_user(application_user_id))
