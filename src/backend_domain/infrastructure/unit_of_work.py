"""Unit of work over any set of repositories."""

import logging
from typing import Iterable, List, Optional

from ..core.events import DomainEvent
from ..core.protocols import DomainEventDispatcher, Repository

logger = logging.getLogger(__name__)


class UnitOfWork:
    """Commits staged repository writes, then dispatches their events.

    Each repository saves in its own transaction; a conflict in a later
    repository does not undo earlier ones. Events are drained from every
    saved aggregate exactly once and dispatched in the order they were
    raised. Dispatch problems are logged and never undo the commit.
    """

    def __init__(
        self,
        repositories: Iterable[Repository],
        dispatcher: Optional[DomainEventDispatcher] = None,
    ):
        self.repositories: List[Repository] = list(repositories)
        self.dispatcher = dispatcher

    async def commit(self) -> List[DomainEvent]:
        """Save every repository and dispatch the resulting events.

        If a repository fails to save, the events of the repositories
        saved before it are still dispatched and the error is re-raised.

        Returns:
            The dispatched events, in raise order

        Raises:
            ConcurrencyConflictError: If a repository detects a stale version
        """
        saved = []
        for repository in self.repositories:
            try:
                saved.extend(await repository.save_changes())
            except Exception:
                if saved:
                    logger.warning(
                        f"Save failed after {len(saved)} aggregate(s) were committed; "
                        f"dispatching their events"
                    )
                    await self._publish(saved)
                raise

        events = await self._publish(saved)
        logger.debug(f"Committed {len(saved)} aggregate(s) with {len(events)} event(s)")
        return events

    async def _publish(self, saved: List) -> List[DomainEvent]:
        events = sorted(
            (event for aggregate in saved for event in aggregate.meta.pull_events()),
            key=lambda event: event.sequence,
        )
        if events and self.dispatcher is not None:
            await self._dispatch(events)
        return events

    async def _dispatch(self, events: List[DomainEvent]) -> None:
        try:
            report = await self.dispatcher.dispatch(events)
        except Exception:
            logger.exception(f"Dispatching {len(events)} committed event(s) failed")
            return

        failures = getattr(report, "failures", None)
        if failures:
            logger.warning(f"{len(failures)} event handler(s) failed after commit")

    async def rollback(self) -> None:
        for repository in self.repositories:
            repository.discard_changes()
        logger.debug("Discarded staged changes")

    async def __aenter__(self) -> "UnitOfWork":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if exc_type is not None:
            await self.rollback()
