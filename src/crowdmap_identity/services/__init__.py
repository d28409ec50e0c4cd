"""Identity services - password hashing."""

from crowdmap_identity.services.password_service import PasswordHashingService

__all__ = ["PasswordHashingService"]
