"""Verify (and consume) a backup code."""

import logging
from dataclasses import dataclass
from typing import Optional

from .....core.protocols import UnitOfWork
from .....core.shared import ConflictRetryPolicy, run_with_conflict_retry
from .....core.value_objects import MfaMethodId
from ...core.protocols import MfaMethodRepository
from ._loading import ensure_can_attempt, load_mfa_method

logger = logging.getLogger(__name__)


@dataclass
class VerifyBackupCodeCommand:
    mfa_method_id: MfaMethodId
    code: str


@dataclass
class BackupCodeVerificationResult:
    is_valid: bool
    remaining_backup_codes: int
    is_locked: bool


class VerifyBackupCodeCommandHandler:
    """A matching code is consumed and counts as a successful attempt;
    a wrong code counts as a failed attempt."""

    def __init__(
        self,
        repository: MfaMethodRepository,
        unit_of_work: UnitOfWork,
        retry_policy: Optional[ConflictRetryPolicy] = None,
    ):
        self._repository = repository
        self._unit_of_work = unit_of_work
        self._retry_policy = retry_policy or ConflictRetryPolicy.from_settings()

    async def execute(self, command: VerifyBackupCodeCommand) -> BackupCodeVerificationResult:
        async def attempt() -> BackupCodeVerificationResult:
            async with self._unit_of_work:
                method = await load_mfa_method(self._repository, command.mfa_method_id)
                ensure_can_attempt(method)

                is_valid = method.validate_backup_code(command.code)
                if is_valid:
                    method.record_successful_attempt()
                else:
                    method.record_failed_attempt()
                await self._repository.update(method)
                await self._unit_of_work.commit()

                return BackupCodeVerificationResult(
                    is_valid=is_valid,
                    remaining_backup_codes=method.remaining_backup_codes,
                    is_locked=method.is_locked(),
                )

        result = await run_with_conflict_retry(attempt, self._retry_policy)
        if not result.is_valid:
            logger.warning(f"Invalid backup code for MFA method {command.mfa_method_id}")
        return result
