"""Search criteria for listing users."""

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Union

RoleFilter = Union[str, Iterable[str], None]


@dataclass(frozen=True)
class UserSearch:
    """Optional search fields for the user listing.

    Attributes
    ----------
    q
        Case-insensitive substring matched against the real name or any
        contact value of the user.
    role
        A single role, a comma-separated list of roles, or an iterable
        of roles. Users whose role is any of them match.
    email
        Exact (case-insensitive) address of an email contact.
    """

    q: str | None = None
    role: RoleFilter = None
    email: str | None = None

    @property
    def roles(self) -> tuple[str, ...]:
        if self.role is None:
            return ()
        if isinstance(self.role, str):
            parts = self.role.split(",")
        else:
            parts = list(self.role)
        return tuple(p.strip() for p in parts if p and p.strip())

    @property
    def query(self) -> str | None:
        if self.q is None:
            return None
        return self.q.strip() or None

    def is_empty(self) -> bool:
        return not (self.query or self.roles or self.email)
