"""Postal address value object."""

from dataclasses import dataclass
from typing import Optional

from ..shared import guard


@dataclass(frozen=True)
class Address:
    """Postal address. Street, city, postal code and country are required."""

    street: str
    city: str
    postal_code: str
    country: str
    province: Optional[str] = None
    district: Optional[str] = None
    details: Optional[str] = None

    def __post_init__(self):
        for name in ("street", "city", "postal_code", "country"):
            value = guard.against_null_or_empty(getattr(self, name), name)
            object.__setattr__(self, name, value.strip())

        for name in ("province", "district", "details"):
            value = getattr(self, name)
            if value is not None:
                object.__setattr__(self, name, value.strip() or None)

    @property
    def full_address(self) -> str:
        """Comma-separated address, optional parts omitted when absent."""
        parts = [self.details, self.street, self.district, self.city, self.province, self.postal_code, self.country]
        return ", ".join(part for part in parts if part)

    def __str__(self) -> str:
        return self.full_address
