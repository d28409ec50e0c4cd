from crowdmap_identity.domain.contact.repositories.contact_repository import (
    ContactReader,
    ContactRepository,
)

__all__ = ["ContactReader", "ContactRepository"]
