"""
JWT-style session token creation and verification.

Tokens are base64-encoded JSON payloads signed with HMAC-SHA256.
Secret key is loaded from ``config.session_secret`` (env var: ``SESSION_SECRET``).
"""

from __future__ import annotations

import hashlib
import hmac
import json
import logging
import time
from base64 import urlsafe_b64decode, urlsafe_b64encode
from typing import Any, Dict, Optional

from config.settings import config

logger = logging.getLogger(__name__)


def _sign(raw: bytes, secret: str) -> str:
    return hmac.new(secret.encode(), raw, hashlib.sha256).hexdigest()


def create_token(
    user: Dict[str, Any],
    *,
    secret: str | None = None,
    expires_in: int | None = None,
) -> str:
    """Create a signed token carrying the account summary and an expiry."""
    secret = secret or config.session_secret
    ttl = expires_in if expires_in is not None else config.session_expiry_seconds
    payload = {
        "sub": user["id"],
        "email": user.get("email"),
        "role": user.get("role"),
        "name": user.get("name"),
        "title": user.get("title"),
        "exp": int(time.time()) + ttl,
    }
    raw = json.dumps(payload).encode()
    return urlsafe_b64encode(raw).decode() + "." + _sign(raw, secret)


def verify_token(token: str | None, *, secret: str | None = None) -> Optional[Dict[str, Any]]:
    """
    Return the token payload, or ``None`` when the token is missing,
    malformed, tampered with, or expired.
    """
    if not token:
        return None
    secret = secret or config.session_secret
    try:
        encoded, sig = token.split(".", 1)
        raw = urlsafe_b64decode(encoded.encode())
        if not hmac.compare_digest(sig, _sign(raw, secret)):
            raise ValueError("bad signature")
        payload = json.loads(raw)
        if payload.get("exp", 0) < time.time():
            raise ValueError("token expired")
        if not payload.get("sub"):
            raise ValueError("missing subject")
        return payload
    except (ValueError, TypeError, AttributeError) as exc:
        logger.debug("Rejected session token: %s", exc)
        return None
