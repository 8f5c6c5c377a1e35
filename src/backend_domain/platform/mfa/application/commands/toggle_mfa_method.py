"""Enable or disable an MFA method."""

import logging
from dataclasses import dataclass
from typing import Optional

from .....core.protocols import UnitOfWork
from .....core.shared import ConflictRetryPolicy, run_with_conflict_retry
from .....core.value_objects import MfaMethodId
from ...core.entities import MfaMethod
from ...core.protocols import MfaMethodRepository
from ._loading import load_mfa_method

logger = logging.getLogger(__name__)


@dataclass
class ToggleMfaMethodCommand:
    mfa_method_id: MfaMethodId
    enable: bool


class ToggleMfaMethodCommandHandler:
    """Enabling an enabled method (or disabling a disabled one) is an error."""

    def __init__(
        self,
        repository: MfaMethodRepository,
        unit_of_work: UnitOfWork,
        retry_policy: Optional[ConflictRetryPolicy] = None,
    ):
        self._repository = repository
        self._unit_of_work = unit_of_work
        self._retry_policy = retry_policy or ConflictRetryPolicy.from_settings()

    async def execute(self, command: ToggleMfaMethodCommand) -> MfaMethod:
        async def attempt() -> MfaMethod:
            async with self._unit_of_work:
                method = await load_mfa_method(self._repository, command.mfa_method_id)
                if command.enable:
                    method.enable()
                else:
                    method.disable()
                await self._repository.update(method)
                await self._unit_of_work.commit()
                return method

        method = await run_with_conflict_retry(attempt, self._retry_policy)
        logger.info(f"MFA method {method.id} {'enabled' if command.enable else 'disabled'}")
        return method
