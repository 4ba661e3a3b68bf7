"""WebSocket handshake authentication via the ``access_token.<jwt>`` subprotocol."""

from __future__ import annotations

from collections.abc import Iterable

from fastapi import WebSocket

from stt_proxy.auth.tokens import validate_token
from stt_proxy.config.websocket import ACCESS_TOKEN_PROTOCOL_PREFIX


def parse_protocols(offered: str | Iterable[str] | None) -> list[str]:
    # Accepts the raw comma-separated header value or an already split list.
    if not offered:
        return []
    items = offered.split(",") if isinstance(offered, str) else offered
    return [item.strip() for item in items if item and item.strip()]


def get_offered_protocols(ws: WebSocket) -> list[str]:
    offered = ws.scope.get("subprotocols")
    if offered:
        return parse_protocols(offered)
    return parse_protocols(ws.headers.get("sec-websocket-protocol"))


def select_access_token_protocol(
    offered: str | Iterable[str] | None,
    secret: str,
    *,
    now: int | None = None,
) -> str | None:
    """Return the full ``access_token.<jwt>`` entry carrying a valid token, if any."""
    for protocol in parse_protocols(offered):
        if not protocol.startswith(ACCESS_TOKEN_PROTOCOL_PREFIX):
            continue
        token = protocol[len(ACCESS_TOKEN_PROTOCOL_PREFIX) :]
        if validate_token(token, secret, now=now):
            return protocol
    return None


__all__ = ["get_offered_protocols", "parse_protocols", "select_access_token_protocol"]
