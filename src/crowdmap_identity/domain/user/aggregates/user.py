"""User aggregate: identity, role, credentials and contacts."""

from collections.abc import Iterable
from datetime import datetime
from typing import Any, Union

from crowdmap_identity.domain.contact import Contact
from crowdmap_identity.domain.user.value_objects import UserRole


class User:
    """
    User aggregate root.

    ``password`` holds plaintext only on a transient, not yet persisted
    aggregate; once stored it is replaced by the hash. ``contacts`` is
    read-composed by the repository and never written through it.

    Mutators record which attributes changed since the aggregate was
    loaded so updates can be limited to those columns.
    """

    def __init__(  # noqa: PLR0913
        self,
        realname: str | None = None,
        role: Union[str, UserRole] = UserRole.USER,
        password: str | None = None,
        email: str | None = None,
        id: int | None = None,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
        contacts: Iterable[Contact] = (),
    ):
        self._id = id
        self._realname = realname
        self._role = role.value if isinstance(role, UserRole) else role
        self._password = password
        self._email = email
        self._created_at = created_at
        self._updated_at = updated_at
        self._contacts = tuple(contacts)
        self._changed: set[str] = set()

    @property
    def id(self) -> int | None:
        return self._id

    @property
    def realname(self) -> str | None:
        return self._realname

    @property
    def role(self) -> str:
        return self._role

    @property
    def is_admin(self) -> bool:
        return self._role == UserRole.ADMIN.value

    @property
    def password(self) -> str | None:
        return self._password

    @property
    def email(self) -> str | None:
        return self._email

    @property
    def created_at(self) -> datetime | None:
        return self._created_at

    @property
    def updated_at(self) -> datetime | None:
        return self._updated_at

    @property
    def contacts(self) -> tuple[Contact, ...]:
        return self._contacts

    def rename(self, realname: str) -> None:
        self._set("realname", realname)

    def change_email(self, email: str | None) -> None:
        self._set("email", email)

    def change_role(self, role: Union[str, UserRole]) -> None:
        self._set("role", role.value if isinstance(role, UserRole) else role)

    def promote_to_admin(self) -> None:
        self.change_role(UserRole.ADMIN)

    def demote_to_user(self) -> None:
        self.change_role(UserRole.USER)

    def set_password(self, plaintext: str) -> None:
        self._set("password", plaintext)

    def attach_contacts(self, contacts: Iterable[Contact]) -> None:
        self._contacts = tuple(contacts)

    def has_changed(self, field: str) -> bool:
        return field in self._changed

    def get_changed(self) -> dict[str, Any]:
        """Return the changed attributes and their current values."""
        return {field: getattr(self, f"_{field}") for field in sorted(self._changed)}

    def mark_persisted(
        self,
        *,
        id: int | None = None,
        password: str | None = None,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
    ) -> None:
        """Apply state assigned by the store and clear change tracking."""
        if id is not None:
            self._id = id
        if password is not None:
            self._password = password
        if created_at is not None:
            self._created_at = created_at
        if updated_at is not None:
            self._updated_at = updated_at
        self._changed.clear()

    def as_dict(self) -> dict[str, Any]:
        return {
            "id": self._id,
            "realname": self._realname,
            "email": self._email,
            "role": self._role,
            "password": self._password,
            "created_at": self._created_at,
            "updated_at": self._updated_at,
            "contacts": self._contacts,
        }

    def _set(self, field: str, value: Any) -> None:
        if getattr(self, f"_{field}") == value:
            return
        setattr(self, f"_{field}", value)
        self._changed.add(field)

    @classmethod
    def create(
        cls,
        realname: str | None = None,
        password: str | None = None,
        role: Union[str, UserRole] = UserRole.USER,
        email: str | None = None,
        contacts: Iterable[Contact] = (),
    ) -> "User":
        return cls(
            realname=realname,
            password=password,
            role=role,
            email=email,
            contacts=contacts,
        )

    @classmethod
    def reconstitute(  # noqa: PLR0913
        cls,
        id: int,
        realname: str | None,
        role: str,
        password: str | None,
        email: str | None,
        created_at: datetime | None,
        updated_at: datetime | None,
        contacts: Iterable[Contact] = (),
    ) -> "User":
        return cls(
            id=id,
            realname=realname,
            role=role,
            password=password,
            email=email,
            created_at=created_at,
            updated_at=updated_at,
            contacts=contacts,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, User):
            return NotImplemented
        if self._id is None or other._id is None:
            return self is other
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id) if self._id is not None else id(self)

    def __repr__(self) -> str:
        return f"User(id={self._id}, realname={self._realname!r}, role={self._role})"
