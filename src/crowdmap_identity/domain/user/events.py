"""Events raised when an administrative user is created, updated or deleted."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from crowdmap_identity.domain.shared.time import utc_now
from crowdmap_identity.domain.user.aggregates.user import User


class AdminUserAction(str, Enum):
    CREATED = "created"
    UPDATED = "updated"
    DELETED = "deleted"


@dataclass(frozen=True)
class AdminUserChanged:
    """Snapshot of an administrative user at the time of the change."""

    action: AdminUserAction
    user_id: int | None
    realname: str | None
    email: str | None
    role: str
    occurred_at: datetime

    @classmethod
    def from_user(
        cls,
        action: AdminUserAction,
        user: User,
        occurred_at: datetime | None = None,
    ) -> "AdminUserChanged":
        return cls(
            action=action,
            user_id=user.id,
            realname=user.realname,
            email=user.email,
            role=user.role,
            occurred_at=occurred_at or utc_now(),
        )


class AdminRoleChangeNotifier(ABC):
    """Outbound port for admin-role changes. Fire-and-forget."""

    @abstractmethod
    def notify(self, event: AdminUserChanged) -> None:
        """Deliver the event. Return values and retries are not handled."""
