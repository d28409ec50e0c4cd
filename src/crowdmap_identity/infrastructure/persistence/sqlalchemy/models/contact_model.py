"""SQLAlchemy model for contacts."""

from sqlalchemy import ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from crowdmap_identity.infrastructure.persistence.sqlalchemy.base import (
    Base,
    TimestampMixin,
)


class ContactModel(Base, TimestampMixin):
    """SQLAlchemy model for a user's contact channel."""

    __tablename__ = "contacts"
    __table_args__ = (UniqueConstraint("type", "contact", name="uq_contacts_type_contact"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    type: Mapped[str] = mapped_column(String(20), nullable=False)
    contact: Mapped[str] = mapped_column(String(255), nullable=False)

    def __repr__(self) -> str:
        return (
            f"<ContactModel(id={self.id}, user_id={self.user_id}, "
            f"type={self.type}, contact={self.contact})>"
        )
