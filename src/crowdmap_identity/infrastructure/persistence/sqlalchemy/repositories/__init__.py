# ruff: noqa: E501 - Long import paths in __init__.py re-exports
"""SQLAlchemy repository implementations for identity management."""

from crowdmap_identity.infrastructure.persistence.sqlalchemy.repositories.contact_repository import (
    ContactRepositorySQLAlchemy,
)
from crowdmap_identity.infrastructure.persistence.sqlalchemy.repositories.factory import (
    IdentityRepositoryFactory,
)
from crowdmap_identity.infrastructure.persistence.sqlalchemy.repositories.password_reset_token_repository import (
    PasswordResetTokenRepositorySQLAlchemy,
)
from crowdmap_identity.infrastructure.persistence.sqlalchemy.repositories.user_repository import (
    UserRepositorySQLAlchemy,
)
from crowdmap_identity.infrastructure.persistence.sqlalchemy.repositories.user_search_filter import (
    build_user_search_predicate,
)

__all__ = [
    "ContactRepositorySQLAlchemy",
    "IdentityRepositoryFactory",
    "PasswordResetTokenRepositorySQLAlchemy",
    "UserRepositorySQLAlchemy",
    "build_user_search_predicate",
]
