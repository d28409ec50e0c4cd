"""Unit tests for the Contact entity."""

from crowdmap_identity.domain.contact import Contact, ContactType


def test_enum_type_is_stored_as_string():
    contact = Contact.create(ContactType.PHONE, "+4912345")

    assert contact.type == "phone"
    assert not contact.is_email


def test_email_factory():
    contact = Contact.email("ada@example.com")

    assert contact.is_email
    assert contact.user_id is None


def test_with_user_id_returns_copy():
    contact = Contact.email("ada@example.com")

    bound = contact.with_user_id(5)

    assert bound.user_id == 5
    assert contact.user_id is None
    assert bound.contact == contact.contact
