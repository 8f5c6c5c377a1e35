"""Validate a customer against a use-case rule set without changing it."""

from dataclasses import dataclass, field
from typing import List

from .....core.rules import BusinessRuleValidator
from .....core.value_objects import CustomerId
from ...core.exceptions import CustomerNotFoundError
from ...core.protocols import CustomerRepository
from ...core.rules import CustomerBusinessRulesFactory, CustomerOperation


@dataclass
class ValidateCustomerOperationQuery:
    customer_id: CustomerId
    operation: CustomerOperation


@dataclass(frozen=True)
class RuleValidationResult:
    """Every broken rule message, for returning all violations at once."""

    is_valid: bool
    broken_rules: List[str] = field(default_factory=list)
    message: str = ""


class ValidateCustomerOperationQueryHandler:
    def __init__(self, repository: CustomerRepository):
        self._repository = repository

    async def execute(self, query: ValidateCustomerOperationQuery) -> RuleValidationResult:
        customer = await self._repository.get_by_id(query.customer_id)
        if customer is None:
            raise CustomerNotFoundError(query.customer_id)

        composite = CustomerBusinessRulesFactory.create_composite_rules(customer, query.operation)
        broken = BusinessRuleValidator.get_broken_rule_messages(composite.all_rules)
        return RuleValidationResult(is_valid=not broken, broken_rules=broken, message=composite.message)
