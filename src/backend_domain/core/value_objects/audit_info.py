"""Audit trail value object."""

from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Optional

from ...utils import utc_now


def _same_user(left: Optional[str], right: Optional[str]) -> bool:
    if left is None or right is None:
        return False
    return left.casefold() == right.casefold()


@dataclass(frozen=True)
class AuditInfo:
    """Creation and last-modification stamps.

    ``created_by`` and ``created_at`` never change after construction;
    ``update_modified`` returns a new instance instead of mutating.
    """

    created_by: Optional[str] = None
    created_at: datetime = field(default_factory=utc_now)
    modified_by: Optional[str] = None
    modified_at: Optional[datetime] = None
    ip_address: Optional[str] = None
    user_agent: Optional[str] = None

    @classmethod
    def create(cls, created_by: Optional[str] = None, ip_address: Optional[str] = None,
               user_agent: Optional[str] = None) -> 'AuditInfo':
        return cls(created_by=created_by, ip_address=ip_address, user_agent=user_agent)

    def update_modified(self, modified_by: Optional[str], ip_address: Optional[str] = None,
                        user_agent: Optional[str] = None) -> 'AuditInfo':
        """Return a copy stamped with the new modifier and the current time."""
        return replace(
            self,
            modified_by=modified_by,
            modified_at=utc_now(),
            ip_address=ip_address if ip_address is not None else self.ip_address,
            user_agent=user_agent if user_agent is not None else self.user_agent,
        )

    @property
    def has_been_modified(self) -> bool:
        return self.modified_at is not None

    def was_created_by(self, user: Optional[str]) -> bool:
        return _same_user(self.created_by, user)

    def was_last_modified_by(self, user: Optional[str]) -> bool:
        return _same_user(self.modified_by, user)
