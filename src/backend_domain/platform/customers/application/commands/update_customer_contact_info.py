"""Update customer contact information command."""

import logging
from dataclasses import dataclass
from typing import Optional

from .....core.protocols import UnitOfWork
from .....core.shared import ConflictRetryPolicy, run_with_conflict_retry
from .....core.value_objects import Address, CustomerId
from ...core.entities import Customer
from ...core.exceptions import CustomerNotFoundError
from ...core.protocols import CustomerRepository

logger = logging.getLogger(__name__)


@dataclass
class UpdateCustomerContactInfoCommand:
    """Contact fields left as None are not changed."""

    customer_id: CustomerId
    updated_by: str
    email: Optional[str] = None
    phone_number: Optional[str] = None
    mobile_number: Optional[str] = None
    primary_address: Optional[Address] = None


class UpdateCustomerContactInfoCommandHandler:
    def __init__(
        self,
        repository: CustomerRepository,
        unit_of_work: UnitOfWork,
        retry_policy: Optional[ConflictRetryPolicy] = None,
    ):
        self._repository = repository
        self._unit_of_work = unit_of_work
        self._retry_policy = retry_policy or ConflictRetryPolicy.from_settings()

    async def execute(self, command: UpdateCustomerContactInfoCommand) -> Customer:
        async def attempt() -> Customer:
            async with self._unit_of_work:
                customer = await self._repository.get_by_id(command.customer_id)
                if customer is None:
                    raise CustomerNotFoundError(command.customer_id)

                if command.email is not None:
                    customer.set_email(command.email, command.updated_by)
                if command.phone_number is not None:
                    customer.set_phone_number(command.phone_number, command.updated_by)
                if command.mobile_number is not None:
                    customer.set_mobile_number(command.mobile_number, command.updated_by)
                if command.primary_address is not None:
                    customer.set_primary_address(command.primary_address, command.updated_by)

                if customer.meta.is_dirty:
                    await self._repository.update(customer)
                    await self._unit_of_work.commit()
                return customer

        customer = await run_with_conflict_retry(attempt, self._retry_policy)
        logger.info(f"Updated contact info of customer {customer.id}")
        return customer
