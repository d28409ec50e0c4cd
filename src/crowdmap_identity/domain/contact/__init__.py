"""Contact domain: the ways users can be reached (email, phone, ...)."""

from crowdmap_identity.domain.contact.entities import Contact, ContactType
from crowdmap_identity.domain.contact.repositories import (
    ContactReader,
    ContactRepository,
)

__all__ = [
    "Contact",
    "ContactReader",
    "ContactRepository",
    "ContactType",
]
