"""WebSocket protocol configuration and constants."""

from __future__ import annotations

WS_ENDPOINT_PATH = "/api/live-transcription"

# Clients smuggle the session token through Sec-WebSocket-Protocol.
ACCESS_TOKEN_PROTOCOL_PREFIX = "access_token."

# Close codes
WS_CLOSE_NORMAL_CODE = 1000
WS_CLOSE_GOING_AWAY_CODE = 1001
WS_CLOSE_INTERNAL_ERROR_CODE = 1011
WS_CLOSE_UNAUTHORIZED_CODE = 4001

# Reserved codes that must never appear in a close frame.
WS_UNSENDABLE_CLOSE_CODES = frozenset({1005, 1006, 1015})
WS_MIN_CLOSE_CODE = 1000
WS_MAX_CLOSE_CODE = 4999

WS_CLOSE_UPSTREAM_ERROR_REASON = "Upstream connection error"
WS_CLOSE_CLIENT_ERROR_REASON = "Client error"
WS_CLOSE_SHUTDOWN_REASON = "Server shutting down"

# Handshake rejection
WS_HTTP_RESPONSE_EXTENSION = "websocket.http.response"
WS_UNAUTHORIZED_STATUS = 401
WS_UNAUTHORIZED_BODY = "Unauthorized"

# Message log sampling (every Nth binary frame; text frames are always logged)
ENV_WS_CLIENT_LOG_EVERY = "WS_CLIENT_LOG_EVERY"
ENV_WS_UPSTREAM_LOG_EVERY = "WS_UPSTREAM_LOG_EVERY"
DEFAULT_WS_CLIENT_LOG_EVERY = 100
DEFAULT_WS_UPSTREAM_LOG_EVERY = 10

__all__ = [
    "DEFAULT_WS_CLIENT_LOG_EVERY",
    "DEFAULT_WS_UPSTREAM_LOG_EVERY",
    "ENV_WS_CLIENT_LOG_EVERY",
    "ENV_WS_UPSTREAM_LOG_EVERY",
    "ACCESS_TOKEN_PROTOCOL_PREFIX",
    "WS_CLOSE_CLIENT_ERROR_REASON",
    "WS_CLOSE_GOING_AWAY_CODE",
    "WS_CLOSE_INTERNAL_ERROR_CODE",
    "WS_CLOSE_NORMAL_CODE",
    "WS_CLOSE_SHUTDOWN_REASON",
    "WS_CLOSE_UNAUTHORIZED_CODE",
    "WS_CLOSE_UPSTREAM_ERROR_REASON",
    "WS_ENDPOINT_PATH",
    "WS_HTTP_RESPONSE_EXTENSION",
    "WS_MAX_CLOSE_CODE",
    "WS_MIN_CLOSE_CODE",
    "WS_UNAUTHORIZED_BODY",
    "WS_UNAUTHORIZED_STATUS",
    "WS_UNSENDABLE_CLOSE_CODES",
]
