"""Handshake rejection helpers."""

from __future__ import annotations

import logging

from fastapi import WebSocket
from fastapi.responses import PlainTextResponse

from stt_proxy.config.websocket import (
    WS_UNAUTHORIZED_BODY,
    WS_UNAUTHORIZED_STATUS,
    WS_CLOSE_UNAUTHORIZED_CODE,
    WS_HTTP_RESPONSE_EXTENSION,
)

logger = logging.getLogger(__name__)


def supports_denial_response(ws: WebSocket) -> bool:
    extensions = ws.scope.get("extensions") or {}
    return WS_HTTP_RESPONSE_EXTENSION in extensions


async def reject_handshake(ws: WebSocket) -> None:
    """Refuse the upgrade without ever accepting the socket."""
    if supports_denial_response(ws):
        response = PlainTextResponse(WS_UNAUTHORIZED_BODY, status_code=WS_UNAUTHORIZED_STATUS)
        await ws.send_denial_response(response)
        return
    # Without the extension the server answers a pre-accept close with HTTP 403.
    logger.debug("server lacks %s; closing handshake instead", WS_HTTP_RESPONSE_EXTENSION)
    await ws.close(code=WS_CLOSE_UNAUTHORIZED_CODE)


__all__ = ["reject_handshake", "supports_denial_response"]
