from enum import Enum


class UserRole(str, Enum):
    """Well-known role labels. Stored roles are free text."""

    USER = "user"
    ADMIN = "admin"
