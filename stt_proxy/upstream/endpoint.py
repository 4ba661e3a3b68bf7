"""Endpoint adapter for the upstream ``websockets`` client connection."""

from __future__ import annotations

from websockets.asyncio.client import ClientConnection
from websockets.exceptions import ConnectionClosed

from stt_proxy.relay.endpoint import Frame
from stt_proxy.relay.errors import EndpointClosed
from stt_proxy.config.websocket import WS_CLOSE_NORMAL_CODE


class UpstreamEndpoint:
    def __init__(self, connection: ClientConnection) -> None:
        self._conn = connection

    async def receive(self) -> Frame:
        try:
            return await self._conn.recv()
        except ConnectionClosed as exc:
            # No close frame received means the link dropped: surface it as an error.
            if exc.rcvd is None:
                raise
            raise EndpointClosed(exc.rcvd.code, exc.rcvd.reason) from exc

    async def send(self, data: Frame) -> None:
        await self._conn.send(data)

    async def close(self, code: int | None = None, reason: str | None = None) -> None:
        await self._conn.close(code=code or WS_CLOSE_NORMAL_CODE, reason=reason or "")


__all__ = ["UpstreamEndpoint"]
