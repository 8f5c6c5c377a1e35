"""MFA infrastructure."""

from .repositories import InMemoryMfaMethodRepository

__all__ = ["InMemoryMfaMethodRepository"]
