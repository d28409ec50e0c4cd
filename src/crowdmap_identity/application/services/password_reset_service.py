import hashlib
import logging
import secrets
from collections.abc import Callable
from datetime import datetime, timedelta

from crowdmap_identity.domain.shared.time import utc_now
from crowdmap_identity.domain.user import User, UserRepository
from crowdmap_identity.exceptions import InvalidResetTokenError
from crowdmap_identity.repositories import PasswordResetTokenRepository
from crowdmap_identity.services import PasswordHashingService

logger = logging.getLogger(__name__)


class PasswordResetService:
    """Issues, checks and consumes single-use password reset tokens.

    Tokens are valid for ``token_ttl`` after issue. Expiry is evaluated
    when a token is checked; nothing sweeps tokens in the background.
    Only the SHA-256 digest of a token is stored.
    """

    TOKEN_TTL_SECONDS = 1800
    TOKEN_BYTES = 40

    def __init__(
        self,
        user_repository: UserRepository,
        token_repository: PasswordResetTokenRepository,
        password_service: PasswordHashingService,
        token_ttl: timedelta = timedelta(seconds=TOKEN_TTL_SECONDS),
        clock: Callable[[], datetime] = utc_now,
    ):
        self._user_repo = user_repository
        self._token_repo = token_repository
        self._password_service = password_service
        self._token_ttl = token_ttl
        self._clock = clock

    def _hash_token(self, raw_token: str) -> str:
        return hashlib.sha256(raw_token.encode()).hexdigest()

    async def issue_token(self, user: User) -> str:
        """Create a token for ``user`` and return it for out-of-band delivery."""
        if user.id is None:
            msg = "Cannot issue a reset token for an unsaved user"
            raise ValueError(msg)

        raw_token = secrets.token_urlsafe(self.TOKEN_BYTES)
        await self._token_repo.create(
            user_id=user.id,
            token_hash=self._hash_token(raw_token),
            created_at=self._clock(),
        )
        logger.info("Issued password reset token for user: %s", user.id)
        return raw_token

    async def is_valid(self, token: str) -> bool:
        """Unknown and expired tokens are both simply invalid."""
        since = self._clock() - self._token_ttl
        return await self._token_repo.exists_created_after(self._hash_token(token), since)

    async def set_password(self, token: str, new_password: str) -> None:
        """Set the password of the token's owner.

        Neither checks validity nor deletes the token; see reset_password.
        """
        new_hash = self._password_service.hash(new_password)
        updated = await self._token_repo.update_user_password(
            token_hash=self._hash_token(token),
            password_hash=new_hash,
            updated_at=self._clock(),
        )
        if not updated:
            logger.warning("Password reset token did not match any user")

    async def delete_token(self, token: str) -> None:
        await self._token_repo.delete(self._hash_token(token))

    async def reset_password(self, token: str, new_password: str) -> None:
        if not await self.is_valid(token):
            raise InvalidResetTokenError

        await self.set_password(token, new_password)
        await self.delete_token(token)
        logger.info("Password reset completed")

    async def request_reset(self, email: str) -> str | None:
        """Issue a token for the owner of ``email``.

        Returns None when no user has that email contact, so callers can
        answer identically either way and deliver the token themselves.
        """
        user = await self._user_repo.find_by_email(email)
        if not user:
            logger.debug("Password reset requested for unknown email: %s", email)
            return None

        return await self.issue_token(user)

    async def purge_expired(self) -> int:
        return await self._token_repo.cleanup_expired(self._clock() - self._token_ttl)
