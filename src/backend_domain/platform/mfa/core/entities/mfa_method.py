"""MFA method aggregate root.

A method is created disabled, receives its type-specific setup (TOTP
secret, SMS phone number or backup codes) and is then enabled. Failed
attempts lock the method for a fixed window; the lock expires by clock
comparison only.
"""

import base64
import hmac
import secrets
import string
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Any, Dict, List, Optional, Union
from urllib.parse import quote, urlencode

from .....config.constants import MfaLimits
from .....config.settings import get_settings
from .....core.entities import AggregateIdentityMixin, AggregateMetadata
from .....core.events import DomainEvent
from .....core.exceptions import InvalidOperationError
from .....core.rules import PhoneNumberMustBeMobileRule
from .....core.shared import guard
from .....core.value_objects import AuditInfo, MfaMethodId, PhoneNumber
from .....utils import utc_now
from ..events import MfaMethodDisabledEvent, MfaMethodEnabledEvent
from ..value_objects import MfaType

BACKUP_CODE_ALPHABET = string.ascii_uppercase + string.digits
TOTP_SECRET_BYTES = 20


@dataclass(eq=False)
class MfaMethod(AggregateIdentityMixin):
    """MFA method aggregate root."""

    meta: AggregateMetadata
    user_id: str
    mfa_type: MfaType
    audit_info: AuditInfo
    is_enabled: bool = False
    last_used_at: Optional[datetime] = None
    failed_attempts: int = 0
    locked_until: Optional[datetime] = None

    # TOTP
    totp_secret_key: Optional[str] = None
    totp_qr_code_url: Optional[str] = None
    totp_digits: int = 6
    totp_period: int = 30

    # SMS
    phone_number: Optional[PhoneNumber] = None

    # Backup codes
    backup_codes: List[str] = field(default_factory=list)

    @classmethod
    def create(
        cls,
        user_id: str,
        mfa_type: MfaType,
        audit_info: Optional[AuditInfo] = None,
        method_id: Optional[MfaMethodId] = None,
    ) -> 'MfaMethod':
        """Create a disabled method without type-specific setup (version 1)."""
        method = cls._new(user_id, mfa_type, audit_info, method_id)
        method.meta.record_created(user_id)
        return method

    @classmethod
    def create_totp(cls, user_id: str, audit_info: Optional[AuditInfo] = None) -> 'MfaMethod':
        method = cls._new(user_id, MfaType.TOTP, audit_info)
        method._apply_totp_secret()
        method.meta.record_created(user_id)
        return method

    @classmethod
    def create_sms(cls, user_id: str, phone_number: Union[str, PhoneNumber],
                   audit_info: Optional[AuditInfo] = None) -> 'MfaMethod':
        method = cls._new(user_id, MfaType.SMS, audit_info)
        method._apply_phone_number(phone_number)
        method.meta.record_created(user_id)
        return method

    @classmethod
    def create_backup_codes(cls, user_id: str, audit_info: Optional[AuditInfo] = None) -> 'MfaMethod':
        method = cls._new(user_id, MfaType.BACKUP_CODES, audit_info)
        method._apply_backup_codes()
        method.meta.record_created(user_id)
        return method

    @classmethod
    def _new(cls, user_id: str, mfa_type: MfaType, audit_info: Optional[AuditInfo],
             method_id: Optional[MfaMethodId] = None) -> 'MfaMethod':
        guard.against_null_or_empty(user_id, "user_id")
        settings = get_settings()
        return cls(
            meta=AggregateMetadata(id=method_id or MfaMethodId.generate()),
            user_id=user_id,
            mfa_type=MfaType(mfa_type),
            audit_info=audit_info or AuditInfo.create(created_by=user_id),
            totp_digits=settings.totp_digits,
            totp_period=settings.totp_period,
        )

    # State queries

    @property
    def remaining_backup_codes(self) -> int:
        return len(self.backup_codes)

    @property
    def is_setup_complete(self) -> bool:
        if self.mfa_type is MfaType.TOTP:
            return self.totp_secret_key is not None
        if self.mfa_type is MfaType.SMS:
            return self.phone_number is not None
        if self.mfa_type is MfaType.BACKUP_CODES:
            return bool(self.backup_codes)
        return True

    def is_locked(self, now: Optional[datetime] = None) -> bool:
        """Locked while ``locked_until`` lies in the future."""
        if self.locked_until is None:
            return False
        return self.locked_until > (now or utc_now())

    def can_attempt(self, now: Optional[datetime] = None) -> bool:
        return not self.is_locked(now)

    # Enable / disable

    def enable(self) -> List[DomainEvent]:
        if self.is_enabled:
            raise InvalidOperationError("MFA method is already enabled")
        if not self.is_setup_complete:
            raise InvalidOperationError(
                f"MFA method of type {self.mfa_type.name} must be set up before it can be enabled"
            )

        self.is_enabled = True
        self._touch()
        return [self.meta.record_event(MfaMethodEnabledEvent(self.id, self.user_id, self.mfa_type))]

    def disable(self) -> List[DomainEvent]:
        if not self.is_enabled:
            raise InvalidOperationError("MFA method is already disabled")

        self.is_enabled = False
        self.failed_attempts = 0
        self.locked_until = None
        self._touch()
        return [self.meta.record_event(MfaMethodDisabledEvent(self.id, self.user_id, self.mfa_type))]

    # Type-specific setup

    def generate_totp_secret(self) -> List[DomainEvent]:
        self._ensure_type(MfaType.TOTP, "generate TOTP secret")
        self._apply_totp_secret()
        return self._touch()

    def set_phone_number(self, phone_number: Union[str, PhoneNumber]) -> List[DomainEvent]:
        self._ensure_type(MfaType.SMS, "set phone number")
        self._apply_phone_number(phone_number)
        return self._touch()

    def generate_backup_codes(self) -> List[DomainEvent]:
        self._ensure_type(MfaType.BACKUP_CODES, "generate backup codes")
        self._apply_backup_codes()
        return self._touch()

    def validate_backup_code(self, code: str) -> bool:
        """Consume ``code`` if it is in the pool.

        A wrong code, or a method of another type, returns False and
        changes nothing.
        """
        if self.mfa_type is not MfaType.BACKUP_CODES or not code:
            return False

        candidate = code.strip().upper()
        for index, stored in enumerate(self.backup_codes):
            if hmac.compare_digest(stored.encode("utf-8"), candidate.encode("utf-8")):
                del self.backup_codes[index]
                self._touch()
                return True
        return False

    # Attempt tracking

    def record_successful_attempt(self) -> List[DomainEvent]:
        self.failed_attempts = 0
        self.locked_until = None
        self.last_used_at = utc_now()
        return self._touch()

    def record_failed_attempt(self) -> List[DomainEvent]:
        self.failed_attempts += 1
        if self.failed_attempts >= MfaLimits.MAX_FAILED_ATTEMPTS:
            self.locked_until = utc_now() + timedelta(minutes=MfaLimits.LOCKOUT_MINUTES)
        return self._touch()

    # Internals

    def _ensure_type(self, expected: MfaType, operation: str) -> None:
        if self.mfa_type is not expected:
            raise InvalidOperationError(
                f"Can only {operation} for {expected.name} type, method type is {self.mfa_type.name}"
            )

    def _touch(self) -> List[DomainEvent]:
        self.audit_info = self.audit_info.update_modified(self.user_id)
        self.meta.record_updated(self.user_id)
        return []

    def _apply_totp_secret(self) -> None:
        settings = get_settings()
        secret = base64.b32encode(secrets.token_bytes(TOTP_SECRET_BYTES)).decode("ascii").rstrip("=")
        issuer = settings.totp_issuer
        query = urlencode({
            "secret": secret,
            "issuer": issuer,
            "digits": self.totp_digits,
            "period": self.totp_period,
        })
        self.totp_secret_key = secret
        self.totp_qr_code_url = f"otpauth://totp/{quote(issuer)}:{quote(self.user_id)}?{query}"

    def _apply_phone_number(self, phone_number: Union[str, PhoneNumber]) -> None:
        guard.against_none(phone_number, "phone_number")
        phone = PhoneNumber.of(phone_number)
        PhoneNumberMustBeMobileRule(phone, "SMS verification").validate()
        self.phone_number = phone

    def _apply_backup_codes(self) -> None:
        settings = get_settings()
        self.backup_codes = [
            "".join(secrets.choice(BACKUP_CODE_ALPHABET) for _ in range(settings.backup_code_length))
            for _ in range(settings.backup_code_count)
        ]

    def to_dict(self) -> Dict[str, Any]:
        """Convert MFA method to dictionary, without secrets or codes."""
        return {
            "id": str(self.id),
            "user_id": self.user_id,
            "mfa_type": self.mfa_type.name,
            "is_enabled": self.is_enabled,
            "is_locked": self.is_locked(),
            "failed_attempts": self.failed_attempts,
            "locked_until": self.locked_until.isoformat() if self.locked_until else None,
            "last_used_at": self.last_used_at.isoformat() if self.last_used_at else None,
            "phone_number": self.phone_number.get_display_format() if self.phone_number else None,
            "remaining_backup_codes": self.remaining_backup_codes,
            "version": self.meta.version,
        }

    def __str__(self) -> str:
        state = "enabled" if self.is_enabled else "disabled"
        return f"MfaMethod({self.mfa_type.name}, {self.user_id}, {state})"

    def __repr__(self) -> str:
        return (
            f"MfaMethod(id={self.id}, user_id={self.user_id}, type={self.mfa_type.name}, "
            f"enabled={self.is_enabled}, failed_attempts={self.failed_attempts}, version={self.meta.version})"
        )
