"""User repository interface."""

from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence
from typing import Any, Optional

from crowdmap_identity.domain.user.aggregates.user import User
from crowdmap_identity.domain.user.value_objects import UserSearch


class UserRepository(ABC):
    """Repository interface for User aggregates."""

    @abstractmethod
    async def find_by_id(self, user_id: int) -> Optional[User]:
        """Find a user by their ID."""

    @abstractmethod
    async def get_by_id(self, user_id: int) -> User:
        """Get a user by their ID or raise UserNotFoundError."""

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        """Find the user owning an email contact with this address."""

    @abstractmethod
    async def get_by_email(self, email: str) -> User:
        """Get the user owning an email contact or raise UserNotFoundError."""

    @abstractmethod
    async def create(self, user: User) -> int:
        """Hash the plaintext password, persist the user and return its id."""

    @abstractmethod
    async def create_with_hash(self, user: User) -> int:
        """Persist a user whose password is already hashed."""

    @abstractmethod
    async def create_many(self, users: Sequence[User]) -> list[int]:
        """Insert users in one statement, cascade their contacts, return ids."""

    @abstractmethod
    async def update(self, user: User) -> None:
        """Write the changed attributes of a user."""

    @abstractmethod
    async def delete(self, user: User) -> None:
        """Delete a user."""

    @abstractmethod
    async def search(
        self,
        search: UserSearch,
        limit: int | None = None,
        offset: int = 0,
    ) -> list[User]:
        """List users matching the search."""

    @abstractmethod
    async def count(self, search: UserSearch) -> int:
        """Count users matching the search."""

    @abstractmethod
    async def get_total_count(self, filters: Mapping[str, Any] | None = None) -> int:
        """Count users matching equality filters."""

    @abstractmethod
    async def is_unique_email(self, email: str) -> bool:
        """Check that no email contact carries this address."""

    @abstractmethod
    async def register(self, realname: str, email: str, password: str) -> User:
        """Create a user together with its email contact."""
