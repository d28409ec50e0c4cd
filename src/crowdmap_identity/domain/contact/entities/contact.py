"""Contact entity: one way of reaching a user."""

from dataclasses import dataclass, replace
from datetime import datetime
from enum import Enum
from typing import Union


class ContactType(str, Enum):
    EMAIL = "email"
    PHONE = "phone"
    TWITTER = "twitter"


@dataclass(frozen=True)
class Contact:
    """A contact channel and address owned by a user.

    ``user_id`` stays ``None`` while the owner has not been persisted yet.
    """

    type: str
    contact: str
    user_id: int | None = None
    id: int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        kind = self.type.value if isinstance(self.type, ContactType) else self.type
        object.__setattr__(self, "type", kind)

    @classmethod
    def create(
        cls,
        type: Union[str, ContactType],
        contact: str,
        user_id: int | None = None,
    ) -> "Contact":
        return cls(type=type, contact=contact, user_id=user_id)

    @classmethod
    def email(cls, address: str, user_id: int | None = None) -> "Contact":
        return cls(type=ContactType.EMAIL, contact=address, user_id=user_id)

    @property
    def is_email(self) -> bool:
        return self.type == ContactType.EMAIL.value

    def with_user_id(self, user_id: int) -> "Contact":
        return replace(self, user_id=user_id)
