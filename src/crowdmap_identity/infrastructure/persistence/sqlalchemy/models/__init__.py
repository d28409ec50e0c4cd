# ruff: noqa: E501 - Long import paths in __init__.py re-exports
"""SQLAlchemy models for identity management."""

from crowdmap_identity.infrastructure.persistence.sqlalchemy.models.contact_model import (
    ContactModel,
)
from crowdmap_identity.infrastructure.persistence.sqlalchemy.models.password_reset_token_model import (
    PasswordResetTokenModel,
)
from crowdmap_identity.infrastructure.persistence.sqlalchemy.models.user_model import (
    UserModel,
)

__all__ = [
    "ContactModel",
    "PasswordResetTokenModel",
    "UserModel",
]
