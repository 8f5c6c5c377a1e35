"""Evaluate many rules at once and enforce them together."""

from typing import Iterable, List, Union

from .base import BusinessRule
from ..exceptions import BusinessRuleViolationError

RuleArgument = Union[BusinessRule, Iterable[BusinessRule]]


def _flatten(rules) -> List[BusinessRule]:
    flattened: List[BusinessRule] = []
    for item in rules:
        if isinstance(item, BusinessRule):
            flattened.append(item)
        else:
            flattened.extend(_flatten(item))
    return flattened


class BusinessRuleValidator:
    """Static helpers over rules passed individually or as iterables.

    Every rule is evaluated; nothing short-circuits on the first failure.
    """

    @staticmethod
    def get_broken_rule_messages(*rules: RuleArgument) -> List[str]:
        return [rule.message for rule in _flatten(rules) if rule.is_broken()]

    @staticmethod
    def are_valid(*rules: RuleArgument) -> bool:
        return not BusinessRuleValidator.get_broken_rule_messages(*rules)

    @staticmethod
    def validate(*rules: RuleArgument) -> None:
        """Raise a single BusinessRuleViolationError listing all broken rules."""
        messages = BusinessRuleValidator.get_broken_rule_messages(*rules)
        if messages:
            raise BusinessRuleViolationError("; ".join(messages), broken_rules=messages)

    @staticmethod
    async def validate_async(*rules: RuleArgument) -> None:
        BusinessRuleValidator.validate(*rules)
