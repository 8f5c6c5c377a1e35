"""Base repository for PostgreSQL persistence via asyncpg.

Subclasses describe their table and how aggregates map to rows. Adds are
INSERTed; updates and soft deletes are compare-and-swap UPDATEs guarded by
the version loaded from storage. All staged writes of one ``save_changes``
call share a transaction.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Mapping, Optional, Tuple, TypeVar

import asyncpg

from .sql_translator import SpecificationSqlTranslator
from .staging import StagedRepository
from ...core.exceptions import ConcurrencyConflictError
from ...core.specifications import Specification

logger = logging.getLogger(__name__)

T = TypeVar("T")


class AsyncpgRepository(StagedRepository[T], ABC):
    """asyncpg implementation of the Repository protocol."""

    column_map: Mapping[str, str] = {}

    def __init__(self, connection_pool: asyncpg.Pool, schema: str, table: str):
        super().__init__()
        self.connection_pool = connection_pool
        self.schema = schema
        self.table = table
        self.translator = SpecificationSqlTranslator(self.column_map)

    @property
    def qualified_table(self) -> str:
        return f"{self.schema}.{self.table}"

    @abstractmethod
    def _row_to_aggregate(self, row: Mapping[str, Any]) -> T:
        """Rehydrate an aggregate; ``persisted_version`` equals the row version."""

    @abstractmethod
    def _aggregate_to_row(self, aggregate: T) -> Dict[str, Any]:
        """Column values for INSERT/UPDATE, excluding ``id`` and ``version``."""

    async def get_by_id(self, aggregate_id: Any) -> Optional[T]:
        query = f"SELECT * FROM {self.qualified_table} WHERE id = $1"
        async with self.connection_pool.acquire() as conn:
            row = await conn.fetchrow(query, _raw_id(aggregate_id))
            return self._row_to_aggregate(row) if row else None

    async def find(self, specification: Specification) -> List[T]:
        parts = self.translator.translate(specification)
        async with self.connection_pool.acquire() as conn:
            rows = await conn.fetch(parts.select(self.qualified_table), *parts.params)
            return [self._row_to_aggregate(row) for row in rows]

    async def find_one(self, specification: Specification) -> Optional[T]:
        results = await self.find(specification.apply_paging(specification.skip, 1))
        return results[0] if results else None

    async def count(self, specification: Specification) -> int:
        parts = self.translator.translate(specification.without_paging())
        async with self.connection_pool.acquire() as conn:
            return await conn.fetchval(parts.count(self.qualified_table), *parts.params)

    async def get_paged(self, specification: Specification) -> Tuple[List[T], int]:
        items = await self.find(specification)
        total = await self.count(specification)
        return items, total

    async def save_changes(self) -> List[T]:
        staged = self.tracked_aggregates()
        if not staged:
            return []

        async with self.connection_pool.acquire() as conn:
            async with conn.transaction():
                for aggregate in staged:
                    if aggregate.meta.is_new:
                        await self._insert(conn, aggregate)
                    else:
                        await self._update(conn, aggregate)

        for aggregate in staged:
            aggregate.meta.mark_persisted()
        self._clear_staged()
        return staged

    async def _insert(self, conn, aggregate: T) -> None:
        row = self._aggregate_to_row(aggregate)
        columns = ["id", *row.keys(), "version"]
        values = [_raw_id(aggregate.id), *row.values(), aggregate.meta.version]
        placeholders = ", ".join(f"${index}" for index in range(1, len(values) + 1))
        query = f"INSERT INTO {self.qualified_table} ({', '.join(columns)}) VALUES ({placeholders})"

        await conn.execute(query, *values)
        logger.debug(f"Inserted {self.aggregate_type} {aggregate.id} at version {aggregate.meta.version}")

    async def _update(self, conn, aggregate: T) -> None:
        row = self._aggregate_to_row(aggregate)
        assignments = [f"{column} = ${index}" for index, column in enumerate(row.keys(), start=2)]
        version_index = len(row) + 2
        expected_index = version_index + 1
        assignments.append(f"version = ${version_index}")
        query = (
            f"UPDATE {self.qualified_table} SET {', '.join(assignments)} "
            f"WHERE id = $1 AND version = ${expected_index}"
        )
        expected = aggregate.meta.persisted_version

        result = await conn.execute(
            query, _raw_id(aggregate.id), *row.values(), aggregate.meta.version, expected
        )
        if result == "UPDATE 0":
            actual = await conn.fetchval(
                f"SELECT version FROM {self.qualified_table} WHERE id = $1", _raw_id(aggregate.id)
            )
            logger.warning(
                f"Concurrency conflict on {self.aggregate_type} {aggregate.id}: "
                f"expected version {expected}, found {actual}"
            )
            raise ConcurrencyConflictError(self.aggregate_type, aggregate.id, expected, actual)

        logger.debug(f"Updated {self.aggregate_type} {aggregate.id} to version {aggregate.meta.version}")


def _raw_id(aggregate_id: Any) -> Any:
    """Unwrap identifier value objects to the stored UUID."""
    return getattr(aggregate_id, "value", aggregate_id)
