"""
Pytest configuration for crowdmap_identity tests.

Provides domain objects, a controllable clock and repositories bound to
the shared database session.
"""

import pytest

from crowdmap_identity.domain.contact import Contact
from crowdmap_identity.domain.user import AdminUserChanged, User, UserRole
from crowdmap_identity.infrastructure.events import InProcessAdminRoleNotifier
from crowdmap_identity.infrastructure.persistence.sqlalchemy.repositories import (
    ContactRepositorySQLAlchemy,
    PasswordResetTokenRepositorySQLAlchemy,
    UserRepositorySQLAlchemy,
)
from crowdmap_identity.services import PasswordHashingService

from tests.shared.fixtures.clock import FakeClock

# Make shared database fixtures available
from tests.shared.fixtures.database import async_engine, db_session

__all__ = ["async_engine", "db_session"]

# Lowest bcrypt cost, keeps hashing fast in tests
TEST_BCRYPT_ROUNDS = 4


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def password_service() -> PasswordHashingService:
    return PasswordHashingService(rounds=TEST_BCRYPT_ROUNDS)


@pytest.fixture
def admin_events() -> list[AdminUserChanged]:
    """Events received by the notifier subscriber."""
    return []


@pytest.fixture
def notifier(admin_events) -> InProcessAdminRoleNotifier:
    notifier = InProcessAdminRoleNotifier()
    notifier.subscribe(admin_events.append)
    return notifier


@pytest.fixture
def contact_repo(db_session) -> ContactRepositorySQLAlchemy:
    return ContactRepositorySQLAlchemy(db_session)


@pytest.fixture
def user_repo(
    db_session, contact_repo, password_service, notifier, clock
) -> UserRepositorySQLAlchemy:
    return UserRepositorySQLAlchemy(
        db_session,
        contact_repository=contact_repo,
        password_service=password_service,
        notifier=notifier,
        clock=clock,
    )


@pytest.fixture
def token_repo(db_session) -> PasswordResetTokenRepositorySQLAlchemy:
    return PasswordResetTokenRepositorySQLAlchemy(db_session)


@pytest.fixture
def test_user() -> User:
    """Create a standard test user with an email contact."""
    return User.create(
        realname="Ada Lovelace",
        password="secret-pass",
        email="ada@example.com",
        contacts=[Contact.email("ada@example.com")],
    )


@pytest.fixture
def admin_user() -> User:
    """Create an admin test user."""
    return User.create(
        realname="Grace Hopper",
        password="admin-pass",
        role=UserRole.ADMIN,
        email="grace@example.com",
    )
