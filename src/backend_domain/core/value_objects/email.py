"""Email address value object."""

import re
from dataclasses import dataclass
from typing import ClassVar, FrozenSet, Pattern, Union

from ..exceptions import DomainValidationError
from ..shared import guard


@dataclass(frozen=True)
class Email:
    """Normalized (trimmed, lower-cased) email address.

    Domain predicates classify the address for business rules; they never
    raise.
    """

    value: str

    PATTERN: ClassVar[Pattern[str]] = re.compile(r'^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$')

    PERSONAL_DOMAINS: ClassVar[FrozenSet[str]] = frozenset({
        "gmail.com", "yahoo.com", "hotmail.com", "outlook.com", "live.com", "msn.com",
    })
    DISPOSABLE_DOMAINS: ClassVar[FrozenSet[str]] = frozenset({
        "10minutemail.com", "guerrillamail.com", "tempmail.org",
    })
    CORPORATE_KEYWORDS: ClassVar[FrozenSet[str]] = frozenset({
        "corp", "company", "business", "enterprise", "inc", "ltd", "llc",
    })
    EDUCATIONAL_KEYWORDS: ClassVar[FrozenSet[str]] = frozenset({
        "edu", "ac", "school", "university", "college", "institute",
    })
    GOVERNMENT_KEYWORDS: ClassVar[FrozenSet[str]] = frozenset({
        "gov", "government", "state", "municipal", "city",
    })

    def __post_init__(self) -> None:
        guard.against_null_or_empty(self.value, "email")

        normalized = self.value.strip()
        if not self.PATTERN.match(normalized):
            raise DomainValidationError("Invalid email format", field_name="email")

        object.__setattr__(self, 'value', normalized.lower())

    @classmethod
    def of(cls, value: Union[str, 'Email']) -> 'Email':
        """Return ``value`` as an Email, constructing one from a string."""
        return value if isinstance(value, Email) else cls(value)

    def get_domain(self) -> str:
        return self.value.rsplit('@', 1)[1]

    def get_username(self) -> str:
        return self.value.rsplit('@', 1)[0]

    def _domain_labels(self) -> FrozenSet[str]:
        return frozenset(self.get_domain().split('.'))

    def is_business_email(self) -> bool:
        """Anything outside the well-known personal mail providers."""
        return self.get_domain() not in self.PERSONAL_DOMAINS

    def is_disposable_email(self) -> bool:
        return self.get_domain() in self.DISPOSABLE_DOMAINS

    def is_corporate_email(self) -> bool:
        return bool(self._domain_labels() & self.CORPORATE_KEYWORDS)

    def is_educational_email(self) -> bool:
        return bool(self._domain_labels() & self.EDUCATIONAL_KEYWORDS)

    def is_government_email(self) -> bool:
        return bool(self._domain_labels() & self.GOVERNMENT_KEYWORDS)

    def __str__(self) -> str:
        return self.value
