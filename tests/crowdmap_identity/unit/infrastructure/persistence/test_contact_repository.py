"""Tests for ContactRepositorySQLAlchemy."""

import pytest
from sqlalchemy.exc import IntegrityError

from crowdmap_identity.domain.contact import Contact, ContactType
from crowdmap_identity.domain.user import User


@pytest.fixture
def owner() -> User:
    return User.create(realname="Owner", password="pw")


class TestContactRepository:
    @pytest.mark.asyncio
    async def test_create_many_returns_ids_in_order(self, user_repo, contact_repo, owner):
        user_id = await user_repo.create(owner)
        contacts = [
            Contact.email("owner@example.com", user_id=user_id),
            Contact.create(ContactType.PHONE, "555-0100", user_id=user_id),
            Contact.create("twitter", "@owner", user_id=user_id),
        ]

        ids = await contact_repo.create_many(contacts)

        stored = await contact_repo.list_by_user_id(user_id)
        assert [c.id for c in stored] == ids
        assert [c.contact for c in stored] == ["owner@example.com", "555-0100", "@owner"]
        assert [c.type for c in stored] == ["email", "phone", "twitter"]
        assert all(c.created_at is not None for c in stored)

    @pytest.mark.asyncio
    async def test_create_many_empty(self, contact_repo):
        assert await contact_repo.create_many([]) == []

    @pytest.mark.asyncio
    async def test_contact_requires_owner(self, contact_repo):
        with pytest.raises(ValueError):
            await contact_repo.create_many([Contact.email("orphan@example.com")])

    @pytest.mark.asyncio
    async def test_duplicate_contact_violates_constraint(
        self, user_repo, contact_repo, owner
    ):
        """Constraint violations propagate unchanged."""
        user_id = await user_repo.create(owner)
        await contact_repo.create_many([Contact.email("dup@example.com", user_id=user_id)])

        with pytest.raises(IntegrityError):
            await contact_repo.create_many(
                [Contact.email("dup@example.com", user_id=user_id)],
            )

    @pytest.mark.asyncio
    async def test_list_by_user_ids_groups_by_owner(self, user_repo, contact_repo):
        first = await user_repo.create(User.create(realname="First", password="pw"))
        second = await user_repo.create(User.create(realname="Second", password="pw"))
        lonely = await user_repo.create(User.create(realname="Lonely", password="pw"))
        await contact_repo.create_many(
            [
                Contact.email("first@example.com", user_id=first),
                Contact.email("second@example.com", user_id=second),
                Contact.create("phone", "1", user_id=first),
            ],
        )

        grouped = await contact_repo.list_by_user_ids([first, second, lonely, first])

        assert [c.contact for c in grouped[first]] == ["first@example.com", "1"]
        assert [c.contact for c in grouped[second]] == ["second@example.com"]
        assert lonely not in grouped
        assert await contact_repo.list_by_user_ids([]) == {}

    @pytest.mark.asyncio
    async def test_exists_is_case_insensitive(self, user_repo, contact_repo, owner):
        user_id = await user_repo.create(owner)
        await contact_repo.create_many([Contact.email("owner@example.com", user_id=user_id)])

        assert await contact_repo.exists("email", "OWNER@example.com")
        assert not await contact_repo.exists("phone", "owner@example.com")
        assert not await contact_repo.exists("email", "other@example.com")
