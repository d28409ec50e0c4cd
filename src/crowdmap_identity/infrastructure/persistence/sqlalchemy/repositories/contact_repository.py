"""SQLAlchemy implementation of ContactRepository."""

import logging
from collections import defaultdict
from collections.abc import Iterable, Sequence

from sqlalchemy import func, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from crowdmap_identity.domain.contact import Contact, ContactRepository
from crowdmap_identity.domain.shared.time import ensure_tz_aware, utc_now
from crowdmap_identity.infrastructure.persistence.sqlalchemy.models import ContactModel

logger = logging.getLogger(__name__)


class ContactRepositorySQLAlchemy(ContactRepository):
    """SQLAlchemy implementation of the ContactRepository interface."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create_many(self, contacts: Sequence[Contact]) -> list[int]:
        if not contacts:
            return []

        now = utc_now()
        rows = []
        for contact in contacts:
            if contact.user_id is None:
                msg = f"Contact {contact.type}:{contact.contact} has no owning user"
                raise ValueError(msg)
            rows.append(
                {
                    "user_id": contact.user_id,
                    "type": contact.type,
                    "contact": contact.contact,
                    "created_at": contact.created_at or now,
                },
            )

        stmt = insert(ContactModel).returning(
            ContactModel.id,
            sort_by_parameter_order=True,
        )
        result = await self._session.execute(stmt, rows)
        ids = list(result.scalars().all())
        await self._session.flush()

        logger.info("Created %d contacts", len(ids))
        return ids

    async def list_by_user_id(self, user_id: int) -> list[Contact]:
        stmt = (
            select(ContactModel)
            .where(ContactModel.user_id == user_id)
            .order_by(ContactModel.id)
        )
        result = await self._session.execute(stmt)
        return [self._map_to_domain(model) for model in result.scalars().all()]

    async def list_by_user_ids(self, user_ids: Iterable[int]) -> dict[int, list[Contact]]:
        ids = list(dict.fromkeys(user_ids))
        if not ids:
            return {}

        stmt = (
            select(ContactModel)
            .where(ContactModel.user_id.in_(ids))
            .order_by(ContactModel.id)
        )
        result = await self._session.execute(stmt)

        grouped: dict[int, list[Contact]] = defaultdict(list)
        for model in result.scalars().all():
            grouped[model.user_id].append(self._map_to_domain(model))
        return dict(grouped)

    async def exists(self, contact_type: str, value: str) -> bool:
        stmt = (
            select(func.count())
            .select_from(ContactModel)
            .where(
                ContactModel.type == contact_type,
                func.lower(ContactModel.contact) == value.lower(),
            )
        )
        result = await self._session.execute(stmt)
        return result.scalar_one() > 0

    def _map_to_domain(self, model: ContactModel) -> Contact:
        return Contact(
            id=model.id,
            user_id=model.user_id,
            type=model.type,
            contact=model.contact,
            created_at=ensure_tz_aware(model.created_at),
            updated_at=ensure_tz_aware(model.updated_at) if model.updated_at else None,
        )
