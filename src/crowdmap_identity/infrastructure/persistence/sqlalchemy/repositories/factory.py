"""SQLAlchemy repository factory for identity repositories."""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from crowdmap_config.settings import Settings, get_settings
from crowdmap_identity.domain.user import AdminRoleChangeNotifier
from crowdmap_identity.infrastructure.persistence.sqlalchemy.repositories.contact_repository import (  # noqa: E501
    ContactRepositorySQLAlchemy,
)
from crowdmap_identity.infrastructure.persistence.sqlalchemy.repositories.password_reset_token_repository import (  # noqa: E501
    PasswordResetTokenRepositorySQLAlchemy,
)
from crowdmap_identity.infrastructure.persistence.sqlalchemy.repositories.user_repository import (  # noqa: E501
    UserRepositorySQLAlchemy,
)
from crowdmap_identity.services import PasswordHashingService


class IdentityRepositoryFactory:
    """Builds the identity repositories for one session.

    All repositories share the session, so they take part in the same
    transaction. Committing is left to the session owner.
    """

    def __init__(
        self,
        session: AsyncSession,
        settings: Settings | None = None,
        notifier: AdminRoleChangeNotifier | None = None,
    ):
        self._session = session
        self._settings = settings or get_settings()
        self._notifier = notifier

        # Cached instances (created on demand)
        self._password_service: PasswordHashingService | None = None
        self._contact_repo: ContactRepositorySQLAlchemy | None = None
        self._user_repo: UserRepositorySQLAlchemy | None = None
        self._token_repo: PasswordResetTokenRepositorySQLAlchemy | None = None

    @property
    def session(self) -> AsyncSession:
        return self._session

    def password_service(self) -> PasswordHashingService:
        if self._password_service is None:
            self._password_service = PasswordHashingService(
                rounds=self._settings.bcrypt_rounds,
            )
        return self._password_service

    def contact_repository(self) -> ContactRepositorySQLAlchemy:
        if self._contact_repo is None:
            self._contact_repo = ContactRepositorySQLAlchemy(self._session)
        return self._contact_repo

    def user_repository(self) -> UserRepositorySQLAlchemy:
        if self._user_repo is None:
            self._user_repo = UserRepositorySQLAlchemy(
                self._session,
                contact_repository=self.contact_repository(),
                password_service=self.password_service(),
                notifier=self._notifier,
            )
        return self._user_repo

    def token_repository(self) -> PasswordResetTokenRepositorySQLAlchemy:
        if self._token_repo is None:
            self._token_repo = PasswordResetTokenRepositorySQLAlchemy(self._session)
        return self._token_repo
