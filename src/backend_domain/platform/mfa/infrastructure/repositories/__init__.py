"""MFA repositories."""

from .in_memory_mfa_method_repository import InMemoryMfaMethodRepository

__all__ = ["InMemoryMfaMethodRepository"]
