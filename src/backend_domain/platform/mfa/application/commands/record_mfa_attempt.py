"""Record the outcome of an MFA verification attempt."""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from .....config.constants import MfaLimits
from .....core.protocols import UnitOfWork
from .....core.shared import ConflictRetryPolicy, run_with_conflict_retry
from .....core.value_objects import MfaMethodId
from ...core.protocols import MfaMethodRepository
from ._loading import ensure_can_attempt, load_mfa_method

logger = logging.getLogger(__name__)


@dataclass
class RecordMfaAttemptCommand:
    mfa_method_id: MfaMethodId
    succeeded: bool


@dataclass
class MfaAttemptResult:
    mfa_method_id: MfaMethodId
    succeeded: bool
    failed_attempts: int
    is_locked: bool
    locked_until: Optional[datetime] = None

    @property
    def remaining_attempts(self) -> int:
        return max(0, MfaLimits.MAX_FAILED_ATTEMPTS - self.failed_attempts)


class RecordMfaAttemptCommandHandler:
    """Updates attempt counters; refuses attempts while the method is locked.

    Raises:
        MfaMethodLockedError: When the method is locked
        InvalidOperationError: When the method is disabled
    """

    def __init__(
        self,
        repository: MfaMethodRepository,
        unit_of_work: UnitOfWork,
        retry_policy: Optional[ConflictRetryPolicy] = None,
    ):
        self._repository = repository
        self._unit_of_work = unit_of_work
        self._retry_policy = retry_policy or ConflictRetryPolicy.from_settings()

    async def execute(self, command: RecordMfaAttemptCommand) -> MfaAttemptResult:
        async def attempt() -> MfaAttemptResult:
            async with self._unit_of_work:
                method = await load_mfa_method(self._repository, command.mfa_method_id)
                ensure_can_attempt(method)

                if command.succeeded:
                    method.record_successful_attempt()
                else:
                    method.record_failed_attempt()
                await self._repository.update(method)
                await self._unit_of_work.commit()

                return MfaAttemptResult(
                    mfa_method_id=method.id,
                    succeeded=command.succeeded,
                    failed_attempts=method.failed_attempts,
                    is_locked=method.is_locked(),
                    locked_until=method.locked_until,
                )

        result = await run_with_conflict_retry(attempt, self._retry_policy)
        if result.is_locked:
            logger.warning(f"MFA method {result.mfa_method_id} locked until {result.locked_until}")
        return result
