"""
Tests for bcrypt password hashing.
"""

import bcrypt

from auth.password import hash_password, password_too_long, verify_password


class TestHashPassword:
    def test_round_trip(self):
        hashed = hash_password("pw123456")
        assert hashed != "pw123456"
        assert verify_password("pw123456", hashed)

    def test_different_plaintext_fails(self):
        hashed = hash_password("pw123456")
        assert not verify_password("pw1234567", hashed)
        assert not verify_password("PW123456", hashed)

    def test_salted(self):
        assert hash_password("same") != hash_password("same")

    def test_uses_configured_cost(self):
        hashed = hash_password("pw", rounds=5)
        assert hashed.startswith("$2b$05$")

    def test_default_cost_comes_from_config(self):
        # conftest lowers the configured cost to 4
        assert hash_password("pw").startswith("$2b$04$")


class TestVerifyPassword:
    def test_malformed_hash_returns_false(self):
        assert verify_password("pw", "not-a-bcrypt-hash") is False

    def test_empty_inputs_return_false(self):
        hashed = hash_password("pw")
        assert verify_password("", hashed) is False
        assert verify_password("pw", "") is False
        assert verify_password("pw", None) is False

    def test_accepts_hash_from_bcrypt_directly(self):
        hashed = bcrypt.hashpw(b"secret", bcrypt.gensalt(rounds=4)).decode()
        assert verify_password("secret", hashed)

    def test_overlong_password_does_not_raise(self):
        hashed = hash_password("pw")
        assert verify_password("x" * 100, hashed) is False


def test_password_too_long_counts_bytes():
    assert not password_too_long("a" * 72)
    assert password_too_long("a" * 73)
    # "ñ" is two bytes in UTF-8
    assert password_too_long("ñ" * 37)
