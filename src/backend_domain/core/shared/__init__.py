"""Shared kernel helpers: guard clauses and conflict retries."""

from . import guard
from .retry import ConflictRetryPolicy, run_with_conflict_retry

__all__ = [
    "guard",
    "ConflictRetryPolicy",
    "run_with_conflict_retry",
]
