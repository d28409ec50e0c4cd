from crowdmap_identity.domain.contact.entities.contact import Contact, ContactType

__all__ = ["Contact", "ContactType"]
