"""Abstract repository interfaces for identity management."""

from crowdmap_identity.repositories.password_reset_token_repository import (
    PasswordResetTokenData,
    PasswordResetTokenRepository,
)

__all__ = [
    "PasswordResetTokenData",
    "PasswordResetTokenRepository",
]
