"""Unit tests for PasswordHashingService."""

import pytest

from crowdmap_identity.services import PasswordHashingService


@pytest.fixture
def service() -> PasswordHashingService:
    return PasswordHashingService(rounds=4)


class TestPasswordHashingService:
    def test_hash_is_not_plaintext(self, service):
        hashed = service.hash("newpass")

        assert hashed != "newpass"
        assert hashed.startswith("$2")

    def test_hashes_are_salted(self, service):
        assert service.hash("newpass") != service.hash("newpass")

    def test_verify(self, service):
        hashed = service.hash("newpass")

        assert service.verify("newpass", hashed)
        assert not service.verify("oldpass", hashed)

    @pytest.mark.parametrize("bad_hash", [None, "", "not-a-bcrypt-hash"])
    def test_verify_rejects_missing_or_invalid_hash(self, service, bad_hash):
        assert not service.verify("newpass", bad_hash)

    def test_needs_rehash(self, service):
        assert not service.needs_rehash(service.hash("pw"))
        assert PasswordHashingService(rounds=5).needs_rehash(service.hash("pw"))
        assert service.needs_rehash("garbage")
