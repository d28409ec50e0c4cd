"""Predicate builder for user searches.

Contact conditions select the ids of users owning a matching contact, so
every clause is evaluated per user. Two clauses satisfied by different
contacts of the same user still match together.
"""

from sqlalchemy import ColumnElement, and_, func, or_, select

from crowdmap_identity.domain.contact import ContactType
from crowdmap_identity.domain.user import UserSearch
from crowdmap_identity.infrastructure.persistence.sqlalchemy.models import (
    ContactModel,
    UserModel,
)

LIKE_ESCAPE = "\\"


def _contains_pattern(value: str) -> str:
    escaped = (
        value.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )
    return f"%{escaped}%"


def _has_contact(condition: ColumnElement[bool]) -> ColumnElement[bool]:
    subq = (
        select(ContactModel.user_id)
        .where(condition)
        .distinct()
        .scalar_subquery()
    )
    return UserModel.id.in_(subq)


def query_clause(q: str) -> ColumnElement[bool]:
    """Real name or any contact value contains ``q`` (case-insensitive)."""
    pattern = _contains_pattern(q)
    return or_(
        UserModel.realname.ilike(pattern, escape=LIKE_ESCAPE),
        _has_contact(ContactModel.contact.ilike(pattern, escape=LIKE_ESCAPE)),
    )


def role_clause(roles: tuple[str, ...]) -> ColumnElement[bool]:
    return UserModel.role.in_(roles)


def email_clause(email: str) -> ColumnElement[bool]:
    """User owns an email contact equal to ``email``, ignoring case."""
    address = email.strip().lower()
    return _has_contact(
        and_(
            ContactModel.type == ContactType.EMAIL.value,
            func.lower(ContactModel.contact) == address,
        )
    )


def build_user_search_predicate(search: UserSearch) -> ColumnElement[bool] | None:
    """Combine the clauses of every field present in ``search`` with AND.

    Absent fields contribute nothing; an empty search yields ``None``.
    """
    clauses: list[ColumnElement[bool]] = []

    if search.query:
        clauses.append(query_clause(search.query))

    if search.roles:
        clauses.append(role_clause(search.roles))

    if search.email:
        clauses.append(email_clause(search.email))

    if not clauses:
        return None
    return and_(*clauses)
