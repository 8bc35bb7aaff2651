"""
Tests for signed session tokens.
"""

import time
from unittest.mock import patch

from auth.jwt import create_token, verify_token

USER = {
    "id": "0b6b1c1e-4a1e-4d8e-9b57-1f0a7d9e2c11",
    "email": "a@b.com",
    "role": "GENERAL",
    "name": "",
    "title": None,
}


class TestSessionTokens:
    def test_round_trip(self):
        payload = verify_token(create_token(USER, secret="s"), secret="s")
        assert payload is not None
        assert payload["sub"] == USER["id"]
        assert payload["email"] == "a@b.com"
        assert payload["role"] == "GENERAL"

    def test_wrong_secret_rejected(self):
        assert verify_token(create_token(USER, secret="s"), secret="other") is None

    def test_tampered_payload_rejected(self):
        token = create_token(USER, secret="s")
        forged = create_token({**USER, "role": "ADMINISTRADOR"}, secret="x")
        spliced = forged.split(".")[0] + "." + token.split(".")[1]
        assert verify_token(spliced, secret="s") is None

    def test_expired_rejected(self):
        token = create_token(USER, secret="s", expires_in=60)
        with patch("auth.jwt.time.time", return_value=time.time() + 120):
            assert verify_token(token, secret="s") is None

    def test_garbage_rejected(self):
        assert verify_token(None) is None
        assert verify_token("") is None
        assert verify_token("no-dot") is None
        assert verify_token("%%%.abc") is None
