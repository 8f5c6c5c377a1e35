"""Persistence implementations: in-memory store, asyncpg base and SQL translation."""

from .asyncpg_repository import AsyncpgRepository
from .in_memory import InMemoryAggregateStore, InMemoryRepository
from .sql_translator import SpecificationSqlTranslator, SqlQueryParts
from .staging import StagedRepository

__all__ = [
    "AsyncpgRepository",
    "InMemoryAggregateStore",
    "InMemoryRepository",
    "SpecificationSqlTranslator",
    "SqlQueryParts",
    "StagedRepository",
]
