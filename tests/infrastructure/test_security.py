"""Tests for the bcrypt password hasher."""

from homedash.infrastructure.security import BcryptPasswordHasher


class TestBcryptPasswordHasher:

    def test_verify_matches_original_password(self):
        hasher = BcryptPasswordHasher(rounds=4)
        hashed = hasher.hash("Secret123")
        assert hashed != "Secret123"
        assert hasher.verify("Secret123", hashed)
        assert not hasher.verify("secret123", hashed)

    def test_hashes_are_salted(self):
        hasher = BcryptPasswordHasher(rounds=4)
        assert hasher.hash("Secret123") != hasher.hash("Secret123")

    def test_garbage_hash_does_not_verify(self):
        hasher = BcryptPasswordHasher(rounds=4)
        assert not hasher.verify("Secret123", "not-a-bcrypt-hash")
        assert not hasher.verify("Secret123", "")
