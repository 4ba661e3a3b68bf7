"""Environment parsing for runtime settings.

Configuration values are named in `stt_proxy/config/*` and resolved here into
the frozen dataclasses the rest of the server receives explicitly.
"""

from __future__ import annotations

import os
import logging
import secrets
from pathlib import Path

from stt_proxy.errors import ConfigurationError
from stt_proxy.state.settings import (
    AppSettings,
    AuthSettings,
    ServerSettings,
    UpstreamSettings,
    WebSocketSettings,
)
from stt_proxy.config.secrets import (
    TOKEN_EXPIRY_S,
    ENV_SESSION_SECRET,
    ENV_DEEPGRAM_API_KEY,
    SESSION_SECRET_BYTES,
)
from stt_proxy.config.server import (
    ENV_HOST,
    ENV_PORT,
    DEFAULT_HOST,
    DEFAULT_PORT,
    ENV_METADATA_PATH,
    DEFAULT_METADATA_PATH,
)
from stt_proxy.config.upstream import (
    ENV_DEEPGRAM_STT_URL,
    DEFAULT_DEEPGRAM_STT_URL,
    ENV_UPSTREAM_OPEN_TIMEOUT_S,
    DEFAULT_UPSTREAM_OPEN_TIMEOUT_S,
)
from stt_proxy.config.websocket import (
    ENV_WS_CLIENT_LOG_EVERY,
    ENV_WS_UPSTREAM_LOG_EVERY,
    DEFAULT_WS_CLIENT_LOG_EVERY,
    DEFAULT_WS_UPSTREAM_LOG_EVERY,
)

logger = logging.getLogger(__name__)


def _str_env(name: str, default: str) -> str:
    raw = os.getenv(name)
    if raw is None:
        return default
    v = raw.strip()
    return v if v else default


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _load_auth_settings() -> AuthSettings:
    session_secret = (os.getenv(ENV_SESSION_SECRET) or "").strip()
    if not session_secret:
        # Tokens issued by this process stop validating after a restart.
        logger.info("%s not set; using a random per-process secret", ENV_SESSION_SECRET)
        session_secret = secrets.token_hex(SESSION_SECRET_BYTES)
    return AuthSettings(session_secret=session_secret, token_expiry_s=TOKEN_EXPIRY_S)


def _load_upstream_settings() -> UpstreamSettings:
    api_key = (os.getenv(ENV_DEEPGRAM_API_KEY) or "").strip()
    if not api_key:
        raise ConfigurationError(f"{ENV_DEEPGRAM_API_KEY} environment variable is required")

    open_timeout = _float_env(ENV_UPSTREAM_OPEN_TIMEOUT_S, DEFAULT_UPSTREAM_OPEN_TIMEOUT_S)
    if open_timeout <= 0:
        open_timeout = DEFAULT_UPSTREAM_OPEN_TIMEOUT_S

    return UpstreamSettings(
        url=_str_env(ENV_DEEPGRAM_STT_URL, DEFAULT_DEEPGRAM_STT_URL),
        api_key=api_key,
        open_timeout_s=open_timeout,
    )


def _load_server_settings() -> ServerSettings:
    metadata_path = Path(_str_env(ENV_METADATA_PATH, DEFAULT_METADATA_PATH)).expanduser()
    return ServerSettings(
        host=_str_env(ENV_HOST, DEFAULT_HOST),
        port=_int_env(ENV_PORT, DEFAULT_PORT),
        metadata_path=metadata_path,
    )


def _load_websocket_settings() -> WebSocketSettings:
    client_log_every = _int_env(ENV_WS_CLIENT_LOG_EVERY, DEFAULT_WS_CLIENT_LOG_EVERY)
    upstream_log_every = _int_env(ENV_WS_UPSTREAM_LOG_EVERY, DEFAULT_WS_UPSTREAM_LOG_EVERY)
    return WebSocketSettings(
        client_log_every=max(1, client_log_every),
        upstream_log_every=max(1, upstream_log_every),
    )


def load_settings() -> AppSettings:
    return AppSettings(
        auth=_load_auth_settings(),
        upstream=_load_upstream_settings(),
        server=_load_server_settings(),
        websocket=_load_websocket_settings(),
    )


__all__ = ["load_settings"]
