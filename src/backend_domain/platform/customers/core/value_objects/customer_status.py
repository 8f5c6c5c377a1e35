"""Customer status and gender enumerations."""

from enum import Enum


class CustomerStatus(str, Enum):
    """Customer lifecycle status."""

    PENDING = "pending"
    ACTIVE = "active"
    INACTIVE = "inactive"
    SUSPENDED = "suspended"
    BLOCKED = "blocked"
    VERIFIED = "verified"
    PREMIUM = "premium"
    REGULAR = "regular"
    DELETED = "deleted"

    @classmethod
    def operational(cls) -> frozenset:
        """Statuses in which a customer may use the service."""
        return frozenset({cls.ACTIVE, cls.VERIFIED, cls.PREMIUM, cls.REGULAR})

    @property
    def is_terminal(self) -> bool:
        return self is CustomerStatus.DELETED


class Gender(str, Enum):
    MALE = "male"
    FEMALE = "female"
    OTHER = "other"

    @classmethod
    def parse(cls, value: str) -> 'Gender':
        """Case-insensitive lookup by value or name."""
        normalized = value.strip().lower()
        for member in cls:
            if member.value == normalized:
                return member
        raise ValueError(f"Invalid gender value: {value}")
