"""Abstract repository interface for password reset tokens."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class PasswordResetTokenData:
    """Immutable password reset token data."""

    token_hash: str
    user_id: int
    created_at: datetime


class PasswordResetTokenRepository(ABC):
    """Abstract repository for password reset tokens."""

    @abstractmethod
    async def create(
        self,
        user_id: int,
        token_hash: str,
        created_at: datetime,
    ) -> None:
        """Store a new password reset token.

        Parameters
        ----------
        user_id
            Id of the user the token belongs to
        token_hash
            SHA-256 hash of the raw token
        created_at
            Issue time; validity is measured from here
        """

    @abstractmethod
    async def find_by_hash(self, token_hash: str) -> PasswordResetTokenData | None:
        """Find a token by its hash, regardless of age.

        Parameters
        ----------
        token_hash
            SHA-256 hash of the raw token

        Returns
        -------
        Token data if found, None otherwise
        """

    @abstractmethod
    async def exists_created_after(self, token_hash: str, since: datetime) -> bool:
        """Check that a token exists and was created strictly after ``since``.

        Parameters
        ----------
        token_hash
            SHA-256 hash of the raw token
        since
            Oldest creation time still considered valid (exclusive)
        """

    @abstractmethod
    async def update_user_password(
        self,
        token_hash: str,
        password_hash: str,
        updated_at: datetime,
    ) -> int:
        """Set the password of the user owning the token.

        The owner is resolved inside the update statement. Token age is
        not checked.

        Returns
        -------
        Number of user rows updated (0 for an unknown token)
        """

    @abstractmethod
    async def delete(self, token_hash: str) -> None:
        """Delete a token. Deleting an unknown token is not an error."""

    @abstractmethod
    async def cleanup_expired(self, older_than: datetime) -> int:
        """Remove tokens created at or before ``older_than``.

        Returns
        -------
        Number of tokens deleted
        """
