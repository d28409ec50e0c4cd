# ruff: noqa: E501 - Long import paths in __init__.py re-exports
"""SQLAlchemy persistence for users, contacts and reset tokens."""

from crowdmap_identity.infrastructure.persistence.sqlalchemy.base import (
    Base,
    TimestampMixin,
)
from crowdmap_identity.infrastructure.persistence.sqlalchemy.models import (
    ContactModel,
    PasswordResetTokenModel,
    UserModel,
)
from crowdmap_identity.infrastructure.persistence.sqlalchemy.repositories import (
    ContactRepositorySQLAlchemy,
    PasswordResetTokenRepositorySQLAlchemy,
    UserRepositorySQLAlchemy,
)

__all__ = [
    "Base",
    "ContactModel",
    "ContactRepositorySQLAlchemy",
    "PasswordResetTokenModel",
    "PasswordResetTokenRepositorySQLAlchemy",
    "TimestampMixin",
    "UserModel",
    "UserRepositorySQLAlchemy",
]
