"""HTTP server configuration."""

from __future__ import annotations

ENV_HOST = "HOST"
ENV_PORT = "PORT"
ENV_METADATA_PATH = "METADATA_PATH"

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8081
DEFAULT_METADATA_PATH = "deepgram.toml"

METADATA_SECTION = "meta"

CORS_ALLOW_ORIGINS = ["*"]
CORS_ALLOW_METHODS = ["GET", "POST", "OPTIONS"]
CORS_ALLOW_HEADERS = ["Content-Type"]

__all__ = [
    "CORS_ALLOW_HEADERS",
    "CORS_ALLOW_METHODS",
    "CORS_ALLOW_ORIGINS",
    "DEFAULT_HOST",
    "DEFAULT_METADATA_PATH",
    "DEFAULT_PORT",
    "ENV_HOST",
    "ENV_METADATA_PATH",
    "ENV_PORT",
    "METADATA_SECTION",
]
