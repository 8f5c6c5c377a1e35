"""MFA method types."""

from enum import IntEnum


class MfaType(IntEnum):
    TOTP = 1
    SMS = 2
    BACKUP_CODES = 3
    EMAIL = 4
    HARDWARE_KEY = 5

    @property
    def requires_setup(self) -> bool:
        """Types that carry a secret, phone or code pool before enabling."""
        return self in (MfaType.TOTP, MfaType.SMS, MfaType.BACKUP_CODES)
