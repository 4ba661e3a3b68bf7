"""Short-lived HS256 session tokens.

Tokens are never stored server-side: validity is the signature plus the
``iat``/``exp`` window, checked once per WebSocket handshake.
"""

from __future__ import annotations

import time
import logging

from authlib.jose import JsonWebToken
from authlib.jose.errors import JoseError

from stt_proxy.config.secrets import TOKEN_EXPIRY_S, TOKEN_ALGORITHM

logger = logging.getLogger(__name__)

# Restricting the algorithm list rejects "none" and asymmetric downgrades.
_jwt = JsonWebToken([TOKEN_ALGORITHM])

_CLAIMS_OPTIONS = {
    "iat": {"essential": True},
    "exp": {"essential": True},
}


def issue_token(secret: str, *, expiry_s: int = TOKEN_EXPIRY_S, now: int | None = None) -> str:
    issued_at = int(time.time()) if now is None else int(now)
    payload = {"iat": issued_at, "exp": issued_at + int(expiry_s)}
    token = _jwt.encode({"alg": TOKEN_ALGORITHM}, payload, secret)
    return token.decode("ascii")


def validate_token(token: str, secret: str, *, now: int | None = None) -> bool:
    """Return True iff *token* is signed with *secret* and *now* is within [iat, exp]."""
    current = int(time.time()) if now is None else int(now)
    try:
        claims = _jwt.decode(token, secret, claims_options=_CLAIMS_OPTIONS)
        claims.validate(now=current, leeway=0)
    except (JoseError, ValueError, TypeError):
        logger.debug("token rejected", exc_info=True)
        return False

    issued_at = claims.get("iat")
    expires_at = claims.get("exp")
    if not isinstance(issued_at, (int, float)) or not isinstance(expires_at, (int, float)):
        return False
    return issued_at <= current <= expires_at


__all__ = ["issue_token", "validate_token"]
