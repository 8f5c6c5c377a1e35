"""Business rule contract and base class.

Rule evaluation (``is_broken``) is pure and never raises; only the
enforcement helpers (``validate``, ``validate_async``) raise.
"""

from abc import ABC, abstractmethod
from typing import Protocol, runtime_checkable

from ..exceptions import BusinessRuleViolationError


@runtime_checkable
class BusinessRule(Protocol):
    """A named, evaluable domain constraint."""

    @property
    def message(self) -> str:
        ...

    def is_broken(self) -> bool:
        ...


class BaseBusinessRule(ABC):
    """Base class for concrete rules."""

    @property
    @abstractmethod
    def message(self) -> str:
        """Human-readable description of the violation."""

    @abstractmethod
    def is_broken(self) -> bool:
        """True when the rule is violated."""

    def is_satisfied(self) -> bool:
        return not self.is_broken()

    def validate(self) -> None:
        """Raise BusinessRuleViolationError if the rule is broken."""
        if self.is_broken():
            message = self.message
            raise BusinessRuleViolationError(message, broken_rules=[message])

    async def validate_async(self) -> None:
        self.validate()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(broken={self.is_broken()})"
