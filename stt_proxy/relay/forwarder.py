"""Bidirectional frame forwarding between a client and an upstream endpoint.

The forwarder is a state machine driven by whichever event fires on either
side (open, message, close, error). It owns no tasks and no locks: every
transition happens on the event loop that drives the session, so state checks
and the sends that follow them cannot interleave with another session.
"""

from __future__ import annotations

import asyncio
import logging
import contextlib

from stt_proxy.state import Side, SessionState, SessionStats
from stt_proxy.config.websocket import (
    WS_MAX_CLOSE_CODE,
    WS_MIN_CLOSE_CODE,
    DEFAULT_WS_CLIENT_LOG_EVERY,
    DEFAULT_WS_UPSTREAM_LOG_EVERY,
    WS_UNSENDABLE_CLOSE_CODES,
    WS_CLOSE_CLIENT_ERROR_REASON,
    WS_CLOSE_INTERNAL_ERROR_CODE,
    WS_CLOSE_UPSTREAM_ERROR_REASON,
)

from .endpoint import Frame, Endpoint

logger = logging.getLogger(__name__)

_ERROR_REASONS = {
    Side.CLIENT: WS_CLOSE_CLIENT_ERROR_REASON,
    Side.UPSTREAM: WS_CLOSE_UPSTREAM_ERROR_REASON,
}


def sendable_close_code(code: int | None) -> int | None:
    """Return *code* if it may appear in a close frame, else None (use the default)."""
    if code is None or code in WS_UNSENDABLE_CLOSE_CODES:
        return None
    if code < WS_MIN_CLOSE_CODE or code > WS_MAX_CLOSE_CODE:
        return None
    return code


class DuplexForwarder:
    def __init__(
        self,
        client: Endpoint,
        *,
        session_id: str,
        client_log_every: int = DEFAULT_WS_CLIENT_LOG_EVERY,
        upstream_log_every: int = DEFAULT_WS_UPSTREAM_LOG_EVERY,
    ) -> None:
        self.session_id = session_id
        self.state = SessionState.PENDING
        self.stats = SessionStats()
        self._endpoints: dict[Side, Endpoint | None] = {Side.CLIENT: client, Side.UPSTREAM: None}
        self._open: dict[Side, bool] = {Side.CLIENT: True, Side.UPSTREAM: False}
        self._log_every = {Side.CLIENT: max(1, client_log_every), Side.UPSTREAM: max(1, upstream_log_every)}
        self._closed = asyncio.Event()

    def is_open(self, side: Side) -> bool:
        return self._open[side]

    @property
    def closed(self) -> bool:
        return self.state is SessionState.CLOSED

    async def wait_closed(self) -> None:
        await self._closed.wait()

    async def on_open(self, upstream: Endpoint) -> bool:
        """Bind the upstream endpoint; returns False if the session is already tearing down."""
        if self.state is not SessionState.PENDING:
            logger.info("session=%s upstream opened after teardown began; closing it", self.session_id)
            with contextlib.suppress(Exception):
                await upstream.close()
            return False
        self._endpoints[Side.UPSTREAM] = upstream
        self._open[Side.UPSTREAM] = True
        self.state = SessionState.ACTIVE
        logger.info("session=%s connected to upstream STT", self.session_id)
        return True

    async def on_message(self, side: Side, data: Frame) -> None:
        count = self.stats.record(side)
        self._log_message(side, data, count)

        target = side.peer
        endpoint = self._endpoints[target]
        if self.state is not SessionState.ACTIVE or not self._open[target] or endpoint is None:
            self.stats.dropped_messages += 1
            logger.debug(
                "session=%s dropped %s frame #%s (state=%s)", self.session_id, side.value, count, self.state.value
            )
            return

        try:
            await endpoint.send(data)
        except Exception as exc:
            await self.on_error(target, exc)

    async def on_close(self, side: Side, code: int | None = None, reason: str | None = None) -> None:
        self._open[side] = False
        if self.state in (SessionState.CLOSING, SessionState.CLOSED):
            return
        logger.info("session=%s %s closed: %s %s", self.session_id, side.value, code, reason or "")
        await self._teardown(side.peer, code=sendable_close_code(code), reason=reason)

    async def on_error(self, side: Side, exc: BaseException) -> None:
        if self.state in (SessionState.CLOSING, SessionState.CLOSED):
            self._open[side] = False
            return
        logger.warning("session=%s %s connection error: %s", self.session_id, side.value, exc)
        self.state = SessionState.CLOSING
        # Release the failed side too; it may still hold a socket.
        await self._close_endpoint(side, code=WS_CLOSE_INTERNAL_ERROR_CODE, reason=_ERROR_REASONS[side])
        await self._teardown(side.peer, code=WS_CLOSE_INTERNAL_ERROR_CODE, reason=_ERROR_REASONS[side])

    async def close(self, code: int | None = None, reason: str | None = None) -> None:
        """Close both sides, e.g. on server shutdown."""
        if self.state is SessionState.CLOSED:
            return
        self.state = SessionState.CLOSING
        await self._close_endpoint(Side.UPSTREAM, code=code, reason=reason)
        await self._teardown(Side.CLIENT, code=code, reason=reason)

    async def _teardown(self, target: Side, *, code: int | None, reason: str | None) -> None:
        self.state = SessionState.CLOSING
        await self._close_endpoint(target, code=code, reason=reason)
        self.state = SessionState.CLOSED
        self._closed.set()

    async def _close_endpoint(self, side: Side, *, code: int | None, reason: str | None) -> None:
        endpoint = self._endpoints[side]
        if endpoint is None or not self._open[side]:
            return
        # Mark first so the close echo arriving on this side is a no-op.
        self._open[side] = False
        try:
            if code is None:
                await endpoint.close()
            else:
                await endpoint.close(code, reason)
        except Exception:
            logger.debug("session=%s closing %s failed", self.session_id, side.value, exc_info=True)

    def _log_message(self, side: Side, data: Frame, count: int) -> None:
        is_binary = isinstance(data, bytes)
        if is_binary and count % self._log_every[side] != 0:
            return
        size = len(data) if is_binary else len(data.encode("utf-8"))
        logger.debug(
            "session=%s %s message #%s (binary: %s, size: %s)",
            self.session_id,
            side.value,
            count,
            is_binary,
            size,
        )


__all__ = ["DuplexForwarder", "sendable_close_code"]
