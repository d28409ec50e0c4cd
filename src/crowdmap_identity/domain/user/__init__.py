"""User domain manages user identity, roles and credentials.

This domain handles:
- User aggregate (identity, role, password, contacts)
- Search criteria for listing users
- Admin-role change events
"""

from crowdmap_identity.domain.user.aggregates import User
from crowdmap_identity.domain.user.events import (
    AdminRoleChangeNotifier,
    AdminUserAction,
    AdminUserChanged,
)
from crowdmap_identity.domain.user.exceptions import (
    EmailAlreadyExistsError,
    EmptyUserBatchError,
    InvalidEmailError,
    MissingPasswordError,
    UserNotFoundError,
)
from crowdmap_identity.domain.user.repositories import UserRepository
from crowdmap_identity.domain.user.value_objects import (
    Email,
    UserRole,
    UserSearch,
)

__all__ = [
    "AdminRoleChangeNotifier",
    "AdminUserAction",
    "AdminUserChanged",
    "Email",
    "EmailAlreadyExistsError",
    "EmptyUserBatchError",
    "InvalidEmailError",
    "MissingPasswordError",
    "User",
    "UserNotFoundError",
    "UserRepository",
    "UserRole",
    "UserSearch",
]
