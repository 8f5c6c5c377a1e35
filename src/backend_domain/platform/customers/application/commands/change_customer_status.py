"""Change customer status command."""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from .....core.events import DomainEvent
from .....core.exceptions import BusinessRuleViolationError
from .....core.protocols import UnitOfWork
from .....core.shared import ConflictRetryPolicy, run_with_conflict_retry
from .....core.value_objects import CustomerId
from ...core.entities import Customer
from ...core.exceptions import CustomerNotFoundError
from ...core.protocols import CustomerRepository

logger = logging.getLogger(__name__)


class CustomerStatusAction(str, Enum):
    ACTIVATE = "activate"
    DEACTIVATE = "deactivate"
    VERIFY = "verify"
    SUSPEND = "suspend"
    BLOCK = "block"
    UPGRADE_TO_PREMIUM = "upgrade_to_premium"
    DOWNGRADE_TO_REGULAR = "downgrade_to_regular"
    DELETE = "delete"


@dataclass
class ChangeCustomerStatusCommand:
    customer_id: CustomerId
    action: CustomerStatusAction
    performed_by: str
    reason: Optional[str] = None


@dataclass
class ChangeCustomerStatusResult:
    customer: Customer
    events: List[DomainEvent] = field(default_factory=list)

    @property
    def changed(self) -> bool:
        return bool(self.events)


class ChangeCustomerStatusCommandHandler:
    """Applies a status transition, re-reading and retrying on version conflicts."""

    def __init__(
        self,
        repository: CustomerRepository,
        unit_of_work: UnitOfWork,
        retry_policy: Optional[ConflictRetryPolicy] = None,
    ):
        self._repository = repository
        self._unit_of_work = unit_of_work
        self._retry_policy = retry_policy or ConflictRetryPolicy.from_settings()

    async def execute(self, command: ChangeCustomerStatusCommand) -> ChangeCustomerStatusResult:
        """Execute the status change.

        Raises:
            CustomerNotFoundError: When the customer does not exist
            BusinessRuleViolationError: When the transition's rules are broken
            ConcurrencyConflictError: When retries are exhausted
        """
        action = CustomerStatusAction(command.action)

        async def attempt() -> ChangeCustomerStatusResult:
            async with self._unit_of_work:
                customer = await self._repository.get_by_id(command.customer_id)
                if customer is None:
                    raise CustomerNotFoundError(command.customer_id)

                events = self._apply(customer, action, command)
                if action is CustomerStatusAction.DELETE:
                    await self._repository.delete(customer)
                elif customer.meta.is_dirty:
                    await self._repository.update(customer)
                await self._unit_of_work.commit()
                return ChangeCustomerStatusResult(customer, events)

        try:
            result = await run_with_conflict_retry(attempt, self._retry_policy)
        except BusinessRuleViolationError as e:
            logger.warning(f"Customer {command.customer_id} cannot {action.value}: {e.message}")
            raise

        if result.changed:
            logger.info(
                f"Customer {command.customer_id} {action.value} by {command.performed_by}, "
                f"status now {result.customer.customer_status.value}"
            )
        return result

    @staticmethod
    def _apply(customer: Customer, action: CustomerStatusAction,
               command: ChangeCustomerStatusCommand) -> List[DomainEvent]:
        by = command.performed_by
        if action is CustomerStatusAction.ACTIVATE:
            return customer.activate(by)
        if action is CustomerStatusAction.DEACTIVATE:
            return customer.deactivate(by)
        if action is CustomerStatusAction.VERIFY:
            return customer.verify(by)
        if action is CustomerStatusAction.SUSPEND:
            return customer.suspend(by, command.reason)
        if action is CustomerStatusAction.BLOCK:
            return customer.block(by, command.reason)
        if action is CustomerStatusAction.UPGRADE_TO_PREMIUM:
            return customer.upgrade_to_premium(by)
        if action is CustomerStatusAction.DOWNGRADE_TO_REGULAR:
            return customer.downgrade_to_regular(by)
        return customer.delete(by, command.reason)
