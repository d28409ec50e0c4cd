"""Identity and authentication exceptions.

These exceptions are raised by the crowdmap_identity package and should be
caught and handled by the application layer.
"""


class AuthError(Exception):
    """Base exception for all authentication errors."""

    def __init__(self, message: str = "Authentication error"):
        self.message = message
        super().__init__(self.message)


class InvalidResetTokenError(AuthError):
    """Raised when a password reset token is invalid or expired."""

    def __init__(self, message: str = "Invalid or expired password reset token"):
        super().__init__(message)
