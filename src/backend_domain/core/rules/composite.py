"""Composite business rule."""

from typing import Iterable, List, Tuple

from .base import BaseBusinessRule, BusinessRule
from ..exceptions import BusinessRuleViolationError
from ...config.constants import RuleMessages


class CompositeBusinessRule(BaseBusinessRule):
    """Broken when any child rule is broken.

    The message lists every broken child after the summary, so callers can
    report all violations at once.

    Args:
        rules: Child rules, evaluated in order
        summary_message: Prefix used in ``message`` when broken
    """

    def __init__(self, rules: Iterable[BusinessRule], *,
                 summary_message: str = RuleMessages.DEFAULT_COMPOSITE):
        self._rules: Tuple[BusinessRule, ...] = tuple(rules)
        self._summary_message = summary_message

    @classmethod
    def of(cls, *rules: BusinessRule,
           summary_message: str = RuleMessages.DEFAULT_COMPOSITE) -> 'CompositeBusinessRule':
        """Build a composite from positional rules."""
        return cls(rules, summary_message=summary_message)

    @property
    def summary_message(self) -> str:
        return self._summary_message

    @property
    def all_rules(self) -> Tuple[BusinessRule, ...]:
        return self._rules

    @property
    def broken_rules(self) -> List[BusinessRule]:
        return [rule for rule in self._rules if rule.is_broken()]

    @property
    def total_rules(self) -> int:
        return len(self._rules)

    @property
    def broken_rules_count(self) -> int:
        return len(self.broken_rules)

    @property
    def has_broken_rules(self) -> bool:
        return self.is_broken()

    def is_broken(self) -> bool:
        return any(rule.is_broken() for rule in self._rules)

    @property
    def message(self) -> str:
        broken = self.broken_rules
        if not broken:
            return ""
        return f"{self._summary_message}: {'; '.join(rule.message for rule in broken)}"

    def validate(self) -> None:
        broken = self.broken_rules
        if broken:
            raise BusinessRuleViolationError(self.message, broken_rules=[rule.message for rule in broken])

    def __len__(self) -> int:
        return len(self._rules)

    def __iter__(self):
        return iter(self._rules)
