"""Register customer command."""

import logging
from dataclasses import dataclass
from typing import Optional

from .....core.exceptions import DuplicateResourceError
from .....core.protocols import UnitOfWork
from ...core.entities import Customer
from ...core.protocols import CustomerRepository

logger = logging.getLogger(__name__)


@dataclass
class RegisterCustomerCommand:
    """Request to register a customer for an identity user."""

    application_user_id: str
    first_name: str
    last_name: str
    created_by: Optional[str] = None


class RegisterCustomerCommandHandler:
    """Creates a Pending customer; one customer per application user."""

    def __init__(self, repository: CustomerRepository, unit_of_work: UnitOfWork):
        self._repository = repository
        self._unit_of_work = unit_of_work

    async def execute(self, command: RegisterCustomerCommand) -> Customer:
        """Execute customer registration.

        Args:
            command: Registration data

        Returns:
            The persisted customer

        Raises:
            DuplicateResourceError: When the user already has a customer
            DomainValidationError: When a required name or id is empty
        """
        existing = await self._repository.get_by_application_user_id(command.application_user_id)
        if existing is not None:
            raise DuplicateResourceError(
                f"Customer for application user {command.application_user_id} already exists",
                error_code="CUSTOMER_ALREADY_EXISTS",
                details={"application_user_id": command.application_user_id},
            )

        customer = Customer.create(
            application_user_id=command.application_user_id,
            first_name=command.first_name,
            last_name=command.last_name,
            created_by=command.created_by,
        )

        async with self._unit_of_work:
            await self._repository.add(customer)
            await self._unit_of_work.commit()

        logger.info(f"Registered customer {customer.id} for application user {command.application_user_id}")
        return customer
