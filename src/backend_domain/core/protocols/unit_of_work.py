"""Unit of work protocol contract."""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class UnitOfWork(Protocol):
    """Protocol for committing staged repository writes.

    ``commit`` saves every registered repository and then dispatches the
    domain events of the saved aggregates. Usable as an async context
    manager; leaving the block with an exception rolls back.
    """

    async def commit(self) -> Any:
        ...

    async def rollback(self) -> None:
        ...

    async def __aenter__(self) -> "UnitOfWork":
        ...

    async def __aexit__(self, exc_type, exc, tb) -> None:
        ...
