from modules.accounts.hashing import Argon2CredentialHasher
from modules.accounts.interfaces import ICredentialHasher


class TestArgon2CredentialHasher:
    def test_implements_interface(self, hasher):
        assert isinstance(hasher, ICredentialHasher)

    def test_hash_is_argon2id(self, hasher):
        digest = hasher.hash("s3cret")
        assert digest.startswith("$argon2id$")
        assert "s3cret" not in digest

    def test_hash_is_salted(self, hasher):
        """Hashing the same password twice should give different digests."""
        assert hasher.hash("s3cret") != hasher.hash("s3cret")

    def test_compare_matches(self, hasher):
        digest = hasher.hash("s3cret")
        assert hasher.compare("s3cret", digest) is True

    def test_compare_rejects_wrong_password(self, hasher):
        digest = hasher.hash("s3cret")
        assert hasher.compare("wrong", digest) is False

    def test_compare_rejects_malformed_digest(self, hasher):
        """A digest that is not an Argon2 hash should compare False, not raise."""
        assert hasher.compare("s3cret", "not-a-hash") is False

    def test_default_parameters(self):
        hasher = Argon2CredentialHasher()
        assert hasher.compare("pw", hasher.hash("pw"))
