"""Value objects for aggregate identifiers."""

from dataclasses import dataclass
from uuid import UUID

from ..exceptions import DomainValidationError
from ...utils import generate_uuid_v7


def _coerce_uuid(value, label: str) -> UUID:
    if isinstance(value, UUID):
        return value
    try:
        return UUID(str(value))
    except (ValueError, TypeError, AttributeError):
        raise DomainValidationError(f"{label} must be a valid UUID, got: {value}", field_name=label)


@dataclass(frozen=True)
class CustomerId:
    """Customer identifier value object with UUIDv7 support."""
    value: UUID

    def __post_init__(self):
        object.__setattr__(self, 'value', _coerce_uuid(self.value, "CustomerId"))

    @classmethod
    def generate(cls) -> 'CustomerId':
        """Generate a new CustomerId using UUIDv7 for time-ordering."""
        return cls(generate_uuid_v7())

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class MfaMethodId:
    """MFA method identifier value object with UUIDv7 support."""
    value: UUID

    def __post_init__(self):
        object.__setattr__(self, 'value', _coerce_uuid(self.value, "MfaMethodId"))

    @classmethod
    def generate(cls) -> 'MfaMethodId':
        """Generate a new MfaMethodId using UUIDv7 for time-ordering."""
        return cls(generate_uuid_v7())

    def __str__(self) -> str:
        return str(self.value)
