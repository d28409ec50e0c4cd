"""Value objects for the user domain."""

from crowdmap_identity.domain.user.value_objects.email import Email
from crowdmap_identity.domain.user.value_objects.user_role import UserRole
from crowdmap_identity.domain.user.value_objects.user_search import UserSearch

__all__ = [
    "Email",
    "UserRole",
    "UserSearch",
]
