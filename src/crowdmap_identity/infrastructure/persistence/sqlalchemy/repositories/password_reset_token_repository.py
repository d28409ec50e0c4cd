"""SQLAlchemy implementation of PasswordResetTokenRepository."""

import logging
from datetime import datetime

from sqlalchemy import delete, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from crowdmap_identity.domain.shared.time import ensure_tz_aware
from crowdmap_identity.infrastructure.persistence.sqlalchemy.models import (
    PasswordResetTokenModel,
    UserModel,
)
from crowdmap_identity.repositories import (
    PasswordResetTokenData,
    PasswordResetTokenRepository,
)

logger = logging.getLogger(__name__)


class PasswordResetTokenRepositorySQLAlchemy(PasswordResetTokenRepository):
    def __init__(self, session: AsyncSession):
        self._session = session

    async def create(
        self,
        user_id: int,
        token_hash: str,
        created_at: datetime,
    ) -> None:
        model = PasswordResetTokenModel(
            reset_token=token_hash,
            user_id=user_id,
            created_at=created_at,
        )
        self._session.add(model)
        await self._session.flush()

    async def find_by_hash(self, token_hash: str) -> PasswordResetTokenData | None:
        stmt = select(PasswordResetTokenModel).where(
            PasswordResetTokenModel.reset_token == token_hash,
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return PasswordResetTokenData(
            token_hash=model.reset_token,
            user_id=model.user_id,
            created_at=ensure_tz_aware(model.created_at),
        )

    async def exists_created_after(self, token_hash: str, since: datetime) -> bool:
        stmt = (
            select(func.count())
            .select_from(PasswordResetTokenModel)
            .where(
                PasswordResetTokenModel.reset_token == token_hash,
                PasswordResetTokenModel.created_at > since,
            )
        )
        result = await self._session.execute(stmt)
        return result.scalar_one() > 0

    async def update_user_password(
        self,
        token_hash: str,
        password_hash: str,
        updated_at: datetime,
    ) -> int:
        owner = (
            select(PasswordResetTokenModel.user_id)
            .where(PasswordResetTokenModel.reset_token == token_hash)
            .scalar_subquery()
        )
        stmt = (
            update(UserModel)
            .where(UserModel.id == owner)
            .values(password=password_hash, updated_at=updated_at)
            .execution_options(synchronize_session="fetch")
        )
        result = await self._session.execute(stmt)
        await self._session.flush()
        return result.rowcount  # type: ignore

    async def delete(self, token_hash: str) -> None:
        stmt = delete(PasswordResetTokenModel).where(
            PasswordResetTokenModel.reset_token == token_hash,
        )
        await self._session.execute(stmt)
        await self._session.flush()

    async def cleanup_expired(self, older_than: datetime) -> int:
        stmt = delete(PasswordResetTokenModel).where(
            PasswordResetTokenModel.created_at <= older_than,
        )
        result = await self._session.execute(stmt)
        await self._session.flush()
        logger.info("Removed %d expired password reset tokens", result.rowcount)
        return result.rowcount  # type: ignore
