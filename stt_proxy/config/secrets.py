"""Secrets and authentication configuration."""

from __future__ import annotations

ENV_DEEPGRAM_API_KEY = "DEEPGRAM_API_KEY"
ENV_SESSION_SECRET = "SESSION_SECRET"

# Session tokens (JWT)
TOKEN_ALGORITHM = "HS256"
TOKEN_EXPIRY_S = 3600
SESSION_SECRET_BYTES = 32

__all__ = [
    "ENV_DEEPGRAM_API_KEY",
    "ENV_SESSION_SECRET",
    "SESSION_SECRET_BYTES",
    "TOKEN_ALGORITHM",
    "TOKEN_EXPIRY_S",
]
