"""SQLAlchemy implementation of UserRepository."""

import logging
from collections.abc import Callable, Iterable, Mapping, Sequence
from dataclasses import replace
from datetime import datetime
from typing import Any

from sqlalchemy import Select, delete, distinct, func, insert, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from crowdmap_identity.domain.contact import Contact, ContactRepository, ContactType
from crowdmap_identity.domain.shared.time import ensure_tz_aware, utc_now
from crowdmap_identity.domain.user import (
    AdminRoleChangeNotifier,
    AdminUserAction,
    AdminUserChanged,
    Email,
    EmailAlreadyExistsError,
    EmptyUserBatchError,
    MissingPasswordError,
    User,
    UserNotFoundError,
    UserRepository,
    UserSearch,
)
from crowdmap_identity.infrastructure.persistence.sqlalchemy.models import (
    ContactModel,
    UserModel,
)
from crowdmap_identity.infrastructure.persistence.sqlalchemy.repositories.user_search_filter import (  # noqa: E501
    build_user_search_predicate,
    email_clause,
)
from crowdmap_identity.services import PasswordHashingService

logger = logging.getLogger(__name__)

# Columns accepted by get_total_count, across the users/contacts join.
FILTERABLE_COLUMNS = {
    "id": UserModel.id,
    "realname": UserModel.realname,
    "email": UserModel.email,
    "role": UserModel.role,
    "user_id": ContactModel.user_id,
    "type": ContactModel.type,
    "contact": ContactModel.contact,
}

# What lastrowid reports after a multi-row INSERT: the first id of the batch
# on MySQL and MariaDB, the last one on SQLite.
FIRST_ROWID_DIALECTS = frozenset({"mysql", "mariadb"})
LAST_ROWID_DIALECTS = frozenset({"sqlite"})


class UserRepositorySQLAlchemy(UserRepository):
    """SQLAlchemy implementation of the UserRepository interface.

    Users are read with their contacts attached. Contact rows are written
    through the contact repository only (bulk creation cascades there).
    """

    def __init__(  # noqa: PLR0913
        self,
        session: AsyncSession,
        contact_repository: ContactRepository,
        password_service: PasswordHashingService,
        notifier: AdminRoleChangeNotifier | None = None,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._session = session
        self._contact_repo = contact_repository
        self._password_service = password_service
        self._notifier = notifier
        self._clock = clock

    async def find_by_id(self, user_id: int) -> User | None:
        stmt = select(UserModel).where(UserModel.id == user_id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return await self._hydrate(model)

    async def get_by_id(self, user_id: int) -> User:
        user = await self.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError(str(user_id))
        return user

    async def find_by_email(self, email: str) -> User | None:
        stmt = select(UserModel).where(email_clause(email))
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return await self._hydrate(model)

    async def get_by_email(self, email: str) -> User:
        user = await self.find_by_email(email)
        if user is None:
            raise UserNotFoundError(email)
        return user

    async def create(self, user: User) -> int:
        if user.password is None:
            raise MissingPasswordError
        password_hash = self._password_service.hash(user.password)
        return await self._insert(user, password_hash)

    async def create_with_hash(self, user: User) -> int:
        return await self._insert(user, user.password)

    async def create_many(self, users: Sequence[User]) -> list[int]:
        users = list(users)
        if not users:
            raise EmptyUserBatchError

        # The store assigns every id in a batch; ids already set on users
        # are overwritten.
        columns = [
            name for name in users[0].as_dict() if name not in ("id", "contacts")
        ]

        created_at = self._clock()
        rows = []
        for user in users:
            data = user.as_dict()
            if data["password"]:
                data["password"] = self._password_service.hash(data["password"])
            del data["contacts"]
            data["created_at"] = created_at
            rows.append({name: data[name] for name in columns})

        user_ids = await self._insert_rows(rows)

        for user_id, user, row in zip(user_ids, users, rows):
            user.mark_persisted(
                id=user_id,
                password=row["password"],
                created_at=created_at,
            )

        contacts = [
            contact.with_user_id(user_id)
            for user_id, user in zip(user_ids, users)
            for contact in user.contacts
        ]
        if contacts:
            contact_ids = iter(await self._contact_repo.create_many(contacts))
            for user in users:
                user.attach_contacts(
                    replace(contact, id=next(contact_ids), user_id=user.id)
                    for contact in user.contacts
                )

        logger.info("Created %d users (%d contacts)", len(user_ids), len(contacts))
        return user_ids

    async def update(self, user: User) -> None:
        if user.id is None:
            msg = "Cannot update a user that has not been persisted"
            raise ValueError(msg)

        values = user.get_changed()
        values.pop("contacts", None)

        now = self._clock()
        values["updated_at"] = now

        if user.has_changed("password") and user.password is not None:
            values["password"] = self._password_service.hash(user.password)

        stmt = update(UserModel).where(UserModel.id == user.id).values(**values)
        result = await self._session.execute(stmt)
        if result.rowcount == 0:
            raise UserNotFoundError(str(user.id))
        await self._session.flush()

        user.mark_persisted(password=values.get("password"), updated_at=now)
        logger.debug("Updated user %s (%s)", user.id, ", ".join(sorted(values)))

        self._notify_if_admin(AdminUserAction.UPDATED, user)

    async def delete(self, user: User) -> None:
        stmt = delete(UserModel).where(UserModel.id == user.id)
        result = await self._session.execute(stmt)
        if result.rowcount == 0:
            raise UserNotFoundError(str(user.id))
        await self._session.flush()
        logger.info("Deleted user: %s", user.id)

        self._notify_if_admin(AdminUserAction.DELETED, user)

    async def search(
        self,
        search: UserSearch,
        limit: int | None = None,
        offset: int = 0,
    ) -> list[User]:
        stmt = self._search_query(search).order_by(UserModel.id)
        if offset:
            stmt = stmt.offset(offset)
        if limit:
            stmt = stmt.limit(limit)

        result = await self._session.execute(stmt)
        models = result.scalars().all()

        contacts = await self._contact_repo.list_by_user_ids(m.id for m in models)
        return [self._map_to_domain(m, contacts.get(m.id, ())) for m in models]

    async def count(self, search: UserSearch) -> int:
        stmt = select(func.count(UserModel.id)).select_from(UserModel)
        predicate = build_user_search_predicate(search)
        if predicate is not None:
            stmt = stmt.where(predicate)

        result = await self._session.execute(stmt)
        return result.scalar_one()

    async def get_total_count(self, filters: Mapping[str, Any] | None = None) -> int:
        stmt = (
            select(func.count(distinct(UserModel.id)))
            .select_from(UserModel)
            .outerjoin(ContactModel, ContactModel.user_id == UserModel.id)
        )
        for name, value in (filters or {}).items():
            column = FILTERABLE_COLUMNS.get(name)
            if column is None:
                msg = f"Cannot filter users by unknown column: {name}"
                raise ValueError(msg)
            stmt = stmt.where(column == value)

        result = await self._session.execute(stmt)
        return result.scalar_one()

    async def is_unique_email(self, email: str) -> bool:
        return not await self._contact_repo.exists(ContactType.EMAIL.value, email)

    async def register(self, realname: str, email: str, password: str) -> User:
        address = Email(email).value
        if not await self.is_unique_email(address):
            raise EmailAlreadyExistsError(address)

        user = User.create(realname=realname, password=password, email=address)
        try:
            await self.create(user)
            contact = Contact.email(address, user_id=user.id)
            [contact_id] = await self._contact_repo.create_many([contact])
        except IntegrityError as e:
            if "unique" in str(e.orig).lower():
                raise EmailAlreadyExistsError(address) from e
            raise

        user.attach_contacts([replace(contact, id=contact_id)])
        logger.info("Registered user %s (email: %s)", user.id, address)
        return user

    async def _insert(self, user: User, password: str | None) -> int:
        now = self._clock()
        model = UserModel(
            realname=user.realname,
            email=user.email,
            role=user.role,
            password=password,
            created_at=now,
        )
        if user.id is not None:
            model.id = user.id

        self._session.add(model)
        await self._session.flush()

        user.mark_persisted(id=model.id, password=password, created_at=now)
        logger.info("Created user: %s (role: %s)", model.id, model.role)

        self._notify_if_admin(AdminUserAction.CREATED, user)
        return model.id

    async def _insert_rows(self, rows: list[dict[str, Any]]) -> list[int]:
        table = UserModel.__table__
        dialect = self._session.get_bind().dialect

        if dialect.insert_executemany_returning:
            stmt = insert(table).returning(table.c.id, sort_by_parameter_order=True)
            result = await self._session.execute(stmt, rows)
            return list(result.scalars().all())

        # Without RETURNING the batch ids are rebuilt from lastrowid and the
        # row count. Only correct when ids are allocated as one contiguous
        # run, i.e. no other writer uses the sequence meanwhile.
        result = await self._session.execute(insert(table).values(rows))
        inserted = result.rowcount
        if dialect.name in FIRST_ROWID_DIALECTS:
            first_id = result.lastrowid
        elif dialect.name in LAST_ROWID_DIALECTS:
            first_id = result.lastrowid - inserted + 1
        else:
            msg = f"Cannot recover ids of a bulk insert on {dialect.name}"
            raise NotImplementedError(msg)
        logger.debug("Reconstructing %d ids from first id %s", inserted, first_id)
        return list(range(first_id, first_id + inserted))

    def _search_query(self, search: UserSearch) -> Select:
        stmt = select(UserModel)
        predicate = build_user_search_predicate(search)
        if predicate is not None:
            stmt = stmt.where(predicate)
        return stmt

    def _notify_if_admin(self, action: AdminUserAction, user: User) -> None:
        if self._notifier is None or not user.is_admin:
            return
        self._notifier.notify(AdminUserChanged.from_user(action, user, self._clock()))

    async def _hydrate(self, model: UserModel) -> User:
        contacts = await self._contact_repo.list_by_user_id(model.id)
        return self._map_to_domain(model, contacts)

    def _map_to_domain(self, model: UserModel, contacts: Iterable[Contact]) -> User:
        return User.reconstitute(
            id=model.id,
            realname=model.realname,
            role=model.role,
            password=model.password,
            email=model.email,
            created_at=ensure_tz_aware(model.created_at),
            updated_at=ensure_tz_aware(model.updated_at) if model.updated_at else None,
            contacts=contacts,
        )
