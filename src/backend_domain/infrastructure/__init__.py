"""Infrastructure: unit of work, event dispatching and persistence."""

from .events import DispatchReport, InMemoryDomainEventDispatcher
from .unit_of_work import UnitOfWork

__all__ = ["DispatchReport", "InMemoryDomainEventDispatcher", "UnitOfWork"]
