"""Retry policy for optimistic concurrency conflicts."""

import asyncio
import logging
import random
from dataclasses import dataclass
from typing import Awaitable, Callable, Optional, TypeVar

from ..exceptions import ConcurrencyConflictError
from ...config.settings import get_settings

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class ConflictRetryPolicy:
    """How often and how fast to re-read and re-apply after a conflict."""

    max_attempts: int = 3
    initial_delay_ms: int = 0
    max_delay_ms: int = 1000
    jitter: bool = True

    def __post_init__(self):
        """Validate retry policy parameters."""
        if self.max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        if self.initial_delay_ms < 0:
            raise ValueError("initial_delay_ms must be non-negative")
        if self.max_delay_ms < self.initial_delay_ms:
            raise ValueError("max_delay_ms must be >= initial_delay_ms")

    @classmethod
    def from_settings(cls) -> "ConflictRetryPolicy":
        """Policy with ``max_attempts`` taken from DomainSettings."""
        return cls(max_attempts=get_settings().conflict_retry_attempts)

    def calculate_delay(self, attempt: int) -> int:
        """
        Calculate exponential backoff for a retry attempt.

        Args:
            attempt: Attempt number that just failed (1-based)

        Returns:
            Delay in milliseconds
        """
        if attempt <= 0 or self.initial_delay_ms == 0:
            return 0

        delay = min(self.initial_delay_ms * (2 ** (attempt - 1)), self.max_delay_ms)

        if self.jitter:
            jitter_range = int(delay * 0.1)
            delay = max(0, delay + random.randint(-jitter_range, jitter_range))

        return delay


async def run_with_conflict_retry(
    operation: Callable[[], Awaitable[T]],
    policy: Optional[ConflictRetryPolicy] = None
) -> T:
    """Run ``operation`` and re-run it when the save hits a version conflict.

    ``operation`` must load the aggregate itself so each attempt works on a
    fresh copy. The last ConcurrencyConflictError propagates once attempts
    are exhausted.
    """
    policy = policy or ConflictRetryPolicy()
    attempt = 1

    while True:
        try:
            return await operation()
        except ConcurrencyConflictError as e:
            if attempt >= policy.max_attempts:
                logger.warning(f"Giving up after {attempt} conflicting attempts: {e.message}")
                raise
            delay_ms = policy.calculate_delay(attempt)
            logger.info(f"Concurrency conflict on attempt {attempt}, retrying in {delay_ms}ms")
            if delay_ms:
                await asyncio.sleep(delay_ms / 1000)
            attempt += 1
