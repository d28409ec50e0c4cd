"""Application services for identity management."""

from crowdmap_identity.application.services.password_reset_service import (
    PasswordResetService,
)

__all__ = ["PasswordResetService"]
