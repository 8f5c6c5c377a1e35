"""Persistence-facing contracts."""

from .event_dispatcher import DomainEventDispatcher
from .repository import Repository
from .unit_of_work import UnitOfWork

__all__ = ["DomainEventDispatcher", "Repository", "UnitOfWork"]
