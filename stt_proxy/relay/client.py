"""Endpoint adapter for the browser-side Starlette WebSocket."""

from __future__ import annotations

from fastapi import WebSocket
from starlette.websockets import WebSocketState

from stt_proxy.config.websocket import WS_CLOSE_NORMAL_CODE

from .errors import EndpointClosed
from .endpoint import Frame


class ClientEndpoint:
    def __init__(self, ws: WebSocket) -> None:
        self._ws = ws

    @property
    def connected(self) -> bool:
        return (
            self._ws.client_state != WebSocketState.DISCONNECTED
            and self._ws.application_state != WebSocketState.DISCONNECTED
        )

    async def receive(self) -> Frame:
        message = await self._ws.receive()
        if message["type"] == "websocket.disconnect":
            raise EndpointClosed(message.get("code"), message.get("reason"))
        text = message.get("text")
        if text is not None:
            return text
        return message.get("bytes") or b""

    async def send(self, data: Frame) -> None:
        if isinstance(data, bytes):
            await self._ws.send_bytes(data)
        else:
            await self._ws.send_text(data)

    async def close(self, code: int | None = None, reason: str | None = None) -> None:
        if not self.connected:
            return
        await self._ws.close(code=code or WS_CLOSE_NORMAL_CODE, reason=reason or "")


__all__ = ["ClientEndpoint"]
