"""Customer repositories."""

from .asyncpg_customer_repository import AsyncpgCustomerRepository
from .in_memory_customer_repository import InMemoryCustomerRepository

__all__ = ["AsyncpgCustomerRepository", "InMemoryCustomerRepository"]
