"""Domain event dispatching."""

from .dispatcher import DispatchReport, HandlerFailure, InMemoryDomainEventDispatcher

__all__ = ["DispatchReport", "HandlerFailure", "InMemoryDomainEventDispatcher"]
