"""SQLAlchemy model for password reset tokens."""

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from crowdmap_identity.domain.shared.time import utc_now
from crowdmap_identity.infrastructure.persistence.sqlalchemy.base import Base


class PasswordResetTokenModel(Base):
    """A reset token, stored as the SHA-256 digest of the raw token."""

    __tablename__ = "user_reset_tokens"

    reset_token: Mapped[str] = mapped_column(String(64), primary_key=True)
    user_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utc_now,
        index=True,
    )

    def __repr__(self) -> str:
        return f"<PasswordResetTokenModel(user_id={self.user_id}, created_at={self.created_at})>"
