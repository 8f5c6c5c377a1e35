"""Domain event dispatcher protocol contract."""

from typing import Any, Protocol, Sequence, runtime_checkable

from ..events import DomainEvent


@runtime_checkable
class DomainEventDispatcher(Protocol):
    """Protocol for delivering domain events to subscribers.

    Implementations decide transport (in-process handlers, message broker).
    """

    async def dispatch(self, events: Sequence[DomainEvent]) -> Any:
        """Deliver events in the given order.

        Args:
            events: Events already sorted by raise order

        Returns:
            Implementation-specific dispatch report
        """
        ...
