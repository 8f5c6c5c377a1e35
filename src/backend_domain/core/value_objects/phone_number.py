"""Iranian phone number value object."""

import re
from dataclasses import dataclass
from typing import ClassVar, FrozenSet, Pattern, Tuple, Union

from ..exceptions import DomainValidationError
from ..shared import guard
from ...utils import to_ascii_digits


@dataclass(frozen=True)
class PhoneNumber:
    """Phone number normalized to international form (``+98XXXXXXXXXX``).

    Accepted inputs, after stripping spaces, dashes, dots and parentheses:
    ``09XXXXXXXXX`` (mobile), ``0XXXXXXXXXX`` (landline), ``+98XXXXXXXXXX``
    and ``0098XXXXXXXXXX``. Persian and Arabic-Indic digits are read as ASCII.
    """

    value: str

    COUNTRY_PREFIX: ClassVar[str] = "+98"
    ACCEPTED_PATTERNS: ClassVar[Tuple[Pattern[str], ...]] = (
        re.compile(r'^09\d{9}$', re.ASCII),
        re.compile(r'^0\d{10}$', re.ASCII),
        re.compile(r'^\+98\d{10}$', re.ASCII),
        re.compile(r'^0098\d{10}$', re.ASCII),
    )
    SEPARATORS: ClassVar[Pattern[str]] = re.compile(r'[\s\-.()]')
    TEHRAN_AREA_CODES: ClassVar[FrozenSet[str]] = frozenset({
        "21", "26", "28", "29", "31", "32", "33", "34", "35", "36", "37", "38", "39",
    })

    def __post_init__(self) -> None:
        guard.against_null_or_empty(self.value, "phone_number")

        cleaned = self.SEPARATORS.sub('', to_ascii_digits(self.value))
        if not any(pattern.match(cleaned) for pattern in self.ACCEPTED_PATTERNS):
            raise DomainValidationError("Invalid phone number format", field_name="phone_number")

        object.__setattr__(self, 'value', self._normalize(cleaned))

    @classmethod
    def _normalize(cls, cleaned: str) -> str:
        if cleaned.startswith("+98"):
            return cleaned
        if cleaned.startswith("0098"):
            return cls.COUNTRY_PREFIX + cleaned[4:]
        # 09XXXXXXXXX or 0XXXXXXXXXX
        return cls.COUNTRY_PREFIX + cleaned[1:]

    @classmethod
    def of(cls, value: Union[str, 'PhoneNumber']) -> 'PhoneNumber':
        """Return ``value`` as a PhoneNumber, constructing one from a string."""
        return value if isinstance(value, PhoneNumber) else cls(value)

    @property
    def national_number(self) -> str:
        """Digits after the country prefix."""
        return self.value[len(self.COUNTRY_PREFIX):]

    def is_mobile(self) -> bool:
        return len(self.value) == 13 and self.national_number.startswith("9")

    def is_landline(self) -> bool:
        return not self.is_mobile()

    def get_area_code(self) -> str:
        """Operator prefix for mobiles (``912``), city code for landlines (``21``)."""
        if self.is_mobile():
            return self.national_number[:3]
        return self.national_number[:2]

    def is_tehran_number(self) -> bool:
        return self.get_area_code() in self.TEHRAN_AREA_CODES

    def is_same_area_code(self, other: 'PhoneNumber') -> bool:
        return self.get_area_code() == other.get_area_code()

    def get_local_format(self) -> str:
        return "0" + self.national_number

    def get_display_format(self) -> str:
        number = self.national_number
        if self.is_mobile():
            return f"+98 {number[:3]}-{number[3:6]}-{number[6:]}"
        return f"+98 {number[:2]}-{number[2:]}"

    def __str__(self) -> str:
        return self.value
