"""In-process domain event dispatcher."""

import inspect
import logging
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Dict, List, Sequence, Type, Union

from ...core.events import DomainEvent

logger = logging.getLogger(__name__)

EventHandler = Callable[[DomainEvent], Union[None, Awaitable[None]]]


@dataclass
class HandlerFailure:
    """A handler that raised while processing an event."""

    event: DomainEvent
    handler_name: str
    error: BaseException


@dataclass
class DispatchReport:
    """Result of dispatching a batch of events."""

    dispatched: List[DomainEvent] = field(default_factory=list)
    failures: List[HandlerFailure] = field(default_factory=list)

    @property
    def succeeded(self) -> bool:
        return not self.failures

    @property
    def handled_count(self) -> int:
        return len(self.dispatched)


class InMemoryDomainEventDispatcher:
    """Registry of handlers per event class.

    A handler registered for a base class also receives its subclasses, so
    handlers on ``DomainEvent`` see every event. Handlers run in
    registration order; a failing handler is recorded and does not stop the
    others.
    """

    def __init__(self):
        self._handlers: Dict[Type[DomainEvent], List[EventHandler]] = {}

    def register(self, event_type: Type[DomainEvent], handler: EventHandler) -> None:
        self._handlers.setdefault(event_type, []).append(handler)
        logger.debug(f"Registered handler {_handler_name(handler)} for {event_type.__name__}")

    def unregister(self, event_type: Type[DomainEvent], handler: EventHandler) -> bool:
        handlers = self._handlers.get(event_type, [])
        if handler in handlers:
            handlers.remove(handler)
            return True
        return False

    def handlers_for(self, event: DomainEvent) -> List[EventHandler]:
        handlers: List[EventHandler] = []
        for event_type in type(event).__mro__:
            handlers.extend(self._handlers.get(event_type, []))
        return handlers

    async def dispatch(self, events: Sequence[DomainEvent]) -> DispatchReport:
        report = DispatchReport()
        for event in events:
            for handler in self.handlers_for(event):
                try:
                    result = handler(event)
                    if inspect.isawaitable(result):
                        await result
                except Exception as e:
                    logger.exception(
                        f"Handler {_handler_name(handler)} failed for {event.event_type} {event.event_id}"
                    )
                    report.failures.append(HandlerFailure(event, _handler_name(handler), e))
            report.dispatched.append(event)
            logger.debug(f"Dispatched {event.event_type} {event.event_id}")
        return report

    def clear(self) -> None:
        self._handlers.clear()


def _handler_name(handler: Any) -> str:
    return getattr(handler, "__qualname__", None) or type(handler).__name__
