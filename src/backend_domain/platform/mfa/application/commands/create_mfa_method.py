"""Create MFA method command."""

import logging
from dataclasses import dataclass
from typing import Optional

from .....core.exceptions import DomainValidationError, DuplicateResourceError
from .....core.protocols import UnitOfWork
from .....core.value_objects import AuditInfo
from ...core.entities import MfaMethod
from ...core.protocols import MfaMethodRepository
from ...core.specifications import mfa_method_for_user_and_type
from ...core.value_objects import MfaType

logger = logging.getLogger(__name__)


@dataclass
class CreateMfaMethodCommand:
    """Request to register a new (disabled) MFA method for a user."""

    user_id: str
    mfa_type: MfaType
    phone_number: Optional[str] = None
    ip_address: Optional[str] = None
    user_agent: Optional[str] = None


class CreateMfaMethodCommandHandler:
    """Creates one method per user and type, with its setup already applied."""

    def __init__(self, repository: MfaMethodRepository, unit_of_work: UnitOfWork):
        self._repository = repository
        self._unit_of_work = unit_of_work

    async def execute(self, command: CreateMfaMethodCommand) -> MfaMethod:
        mfa_type = MfaType(command.mfa_type)
        existing = await self._repository.find_one(mfa_method_for_user_and_type(command.user_id, mfa_type))
        if existing is not None:
            raise DuplicateResourceError(
                f"User {command.user_id} already has a {mfa_type.name} MFA method",
                error_code="MFA_METHOD_ALREADY_EXISTS",
                details={"user_id": command.user_id, "mfa_type": mfa_type.name},
            )

        audit_info = AuditInfo.create(command.user_id, command.ip_address, command.user_agent)
        method = self._build(command, mfa_type, audit_info)

        async with self._unit_of_work:
            await self._repository.add(method)
            await self._unit_of_work.commit()

        logger.info(f"Created {mfa_type.name} MFA method {method.id} for user {command.user_id}")
        return method

    @staticmethod
    def _build(command: CreateMfaMethodCommand, mfa_type: MfaType, audit_info: AuditInfo) -> MfaMethod:
        if mfa_type is MfaType.TOTP:
            return MfaMethod.create_totp(command.user_id, audit_info)
        if mfa_type is MfaType.SMS:
            if not command.phone_number:
                raise DomainValidationError("SMS MFA requires a phone number", field_name="phone_number")
            return MfaMethod.create_sms(command.user_id, command.phone_number, audit_info)
        if mfa_type is MfaType.BACKUP_CODES:
            return MfaMethod.create_backup_codes(command.user_id, audit_info)
        return MfaMethod.create(command.user_id, mfa_type, audit_info)
