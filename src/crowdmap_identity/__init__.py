"""Crowdmap identity: users, contacts, search and password reset."""

from crowdmap_identity.exceptions import AuthError, InvalidResetTokenError
from crowdmap_identity.services import PasswordHashingService

__all__ = [
    "AuthError",
    "InvalidResetTokenError",
    "PasswordHashingService",
]
