"""Iranian national identification code value object."""

import re
from dataclasses import dataclass
from typing import ClassVar, Pattern

from ..exceptions import DomainValidationError
from ..shared import guard
from ...utils import to_ascii_digits


@dataclass(frozen=True)
class NationalCode:
    """Ten-digit national code with a mod-11 check digit."""

    value: str

    PATTERN: ClassVar[Pattern[str]] = re.compile(r'^\d{10}$', re.ASCII)

    def __post_init__(self):
        guard.against_null_or_empty(self.value, "national_code")

        code = to_ascii_digits(self.value.strip())
        if not self.PATTERN.match(code):
            raise DomainValidationError("National code must be exactly 10 digits", field_name="national_code")
        if len(set(code)) == 1:
            raise DomainValidationError("National code cannot consist of a single repeated digit", field_name="national_code")
        if not self._has_valid_check_digit(code):
            raise DomainValidationError("Invalid national code checksum", field_name="national_code")

        object.__setattr__(self, 'value', code)

    @staticmethod
    def _has_valid_check_digit(code: str) -> bool:
        total = sum(int(digit) * weight for digit, weight in zip(code[:9], range(10, 1, -1)))
        remainder = total % 11
        check = int(code[9])
        if remainder < 2:
            return check == remainder
        return check == 11 - remainder

    def masked(self) -> str:
        """Mask all but the last four digits, for logs."""
        return "*" * 6 + self.value[-4:]

    def __str__(self) -> str:
        return self.value
