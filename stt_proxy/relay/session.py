"""Drive a DuplexForwarder from the receive loops of both endpoints."""

from __future__ import annotations

import asyncio
import logging
import contextlib
from collections.abc import Callable, Awaitable

from stt_proxy.state import Side
from stt_proxy.config.websocket import WS_CLOSE_SHUTDOWN_REASON, WS_CLOSE_GOING_AWAY_CODE

from .errors import EndpointClosed
from .endpoint import Endpoint
from .forwarder import DuplexForwarder

logger = logging.getLogger(__name__)


async def _pump(forwarder: DuplexForwarder, side: Side, endpoint: Endpoint) -> None:
    while not forwarder.closed:
        try:
            data = await endpoint.receive()
        except EndpointClosed as exc:
            await forwarder.on_close(side, exc.code, exc.reason)
            return
        except Exception as exc:
            await forwarder.on_error(side, exc)
            return
        await forwarder.on_message(side, data)


async def run_relay_session(
    forwarder: DuplexForwarder,
    client: Endpoint,
    connect_upstream: Callable[[], Awaitable[Endpoint]],
) -> None:
    """Relay until either side terminates.

    The client is not read until the upstream is open, so frames sent early
    wait in the transport and are forwarded in order once the session is active.
    """
    tasks: list[asyncio.Task] = []
    try:
        try:
            upstream = await connect_upstream()
        except Exception as exc:
            await forwarder.on_error(Side.UPSTREAM, exc)
            return

        if not await forwarder.on_open(upstream):
            return

        tasks = [
            asyncio.create_task(_pump(forwarder, Side.CLIENT, client)),
            asyncio.create_task(_pump(forwarder, Side.UPSTREAM, upstream)),
        ]
        await forwarder.wait_closed()
    finally:
        for task in tasks:
            task.cancel()
        if tasks:
            await asyncio.gather(*tasks, return_exceptions=True)
        if not forwarder.closed:
            logger.info("session=%s interrupted; closing both sides", forwarder.session_id)
            with contextlib.suppress(Exception):
                await forwarder.close(WS_CLOSE_GOING_AWAY_CODE, WS_CLOSE_SHUTDOWN_REASON)


__all__ = ["run_relay_session"]
