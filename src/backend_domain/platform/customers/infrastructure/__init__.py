"""Customer infrastructure."""

from .repositories import AsyncpgCustomerRepository, InMemoryCustomerRepository

__all__ = ["AsyncpgCustomerRepository", "InMemoryCustomerRepository"]
