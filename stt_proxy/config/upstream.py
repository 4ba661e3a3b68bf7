"""Upstream STT endpoint configuration."""

from __future__ import annotations

ENV_DEEPGRAM_STT_URL = "DEEPGRAM_STT_URL"
ENV_UPSTREAM_OPEN_TIMEOUT_S = "UPSTREAM_OPEN_TIMEOUT_S"

DEFAULT_DEEPGRAM_STT_URL = "wss://api.deepgram.com/v1/listen"
DEFAULT_UPSTREAM_OPEN_TIMEOUT_S = 10.0

UPSTREAM_AUTH_HEADER = "Authorization"
UPSTREAM_AUTH_SCHEME = "Token"

# Only these client query params are forwarded, in this order.
UPSTREAM_PARAM_DEFAULTS: dict[str, str] = {
    "model": "nova-3",
    "language": "en",
    "smart_format": "true",
    "punctuate": "true",
    "diarize": "false",
    "filler_words": "false",
    "encoding": "linear16",
    "sample_rate": "16000",
    "channels": "1",
}

__all__ = [
    "DEFAULT_DEEPGRAM_STT_URL",
    "DEFAULT_UPSTREAM_OPEN_TIMEOUT_S",
    "ENV_DEEPGRAM_STT_URL",
    "ENV_UPSTREAM_OPEN_TIMEOUT_S",
    "UPSTREAM_AUTH_HEADER",
    "UPSTREAM_AUTH_SCHEME",
    "UPSTREAM_PARAM_DEFAULTS",
]
