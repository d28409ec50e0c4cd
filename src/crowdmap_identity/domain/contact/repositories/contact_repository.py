"""Contact repository interfaces."""

from abc import ABC, abstractmethod
from collections.abc import Iterable, Sequence

from crowdmap_identity.domain.contact.entities import Contact


class ContactReader(ABC):
    """Read-only access to the contacts of users.

    The user repository depends on this port only, so reading a user's
    contacts never requires the full contact store.
    """

    @abstractmethod
    async def list_by_user_id(self, user_id: int) -> list[Contact]:
        """List all contacts owned by a user, ordered by id."""

    @abstractmethod
    async def list_by_user_ids(self, user_ids: Iterable[int]) -> dict[int, list[Contact]]:
        """List contacts for many users at once, keyed by owner id."""


class ContactRepository(ContactReader):
    """Repository interface for Contact entities."""

    @abstractmethod
    async def create_many(self, contacts: Sequence[Contact]) -> list[int]:
        """Persist contacts in one batch and return their ids in input order.

        Every contact must carry a ``user_id``.
        """

    @abstractmethod
    async def exists(self, contact_type: str, value: str) -> bool:
        """Check whether a contact of this type and value is registered."""
