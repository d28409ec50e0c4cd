"""SQLAlchemy model for User aggregate."""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from crowdmap_identity.infrastructure.persistence.sqlalchemy.base import (
    Base,
    TimestampMixin,
)


class UserModel(Base, TimestampMixin):
    """SQLAlchemy model for persisting User aggregates.

    Contacts live in their own table and are joined on read.
    """

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    realname: Mapped[str | None] = mapped_column(String(150), nullable=True)
    email: Mapped[str | None] = mapped_column(String(150), nullable=True, index=True)
    role: Mapped[str] = mapped_column(String(50), default="user", nullable=False)
    password: Mapped[str | None] = mapped_column(String(255), nullable=True)

    def __repr__(self) -> str:
        return f"<UserModel(id={self.id}, realname={self.realname}, role={self.role})>"
