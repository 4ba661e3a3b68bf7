"""Live-transcription WebSocket orchestration: authenticate, connect upstream, relay."""

from __future__ import annotations

import uuid
import logging

from fastapi import WebSocket

from stt_proxy.state import RuntimeDeps
from stt_proxy.relay import Endpoint, ClientEndpoint, DuplexForwarder, run_relay_session
from stt_proxy.upstream.url import build_upstream_url, resolve_upstream_params
from stt_proxy.config.websocket import WS_ENDPOINT_PATH

from .auth import get_offered_protocols, select_access_token_protocol
from .errors import reject_handshake

logger = logging.getLogger(__name__)


async def handle_live_transcription(ws: WebSocket, runtime_deps: RuntimeDeps) -> None:
    settings = runtime_deps.settings
    logger.info("WebSocket upgrade request for: %s", WS_ENDPOINT_PATH)

    protocol = select_access_token_protocol(get_offered_protocols(ws), settings.auth.session_secret)
    if protocol is None:
        logger.info("WebSocket auth failed: invalid or missing token")
        await reject_handshake(ws)
        return

    await ws.accept(subprotocol=protocol)
    session_id = uuid.uuid4().hex

    params = resolve_upstream_params(ws.query_params)
    logger.info(
        "session=%s connecting to upstream STT: model=%s, language=%s, encoding=%s, sample_rate=%s, channels=%s",
        session_id,
        params["model"],
        params["language"],
        params["encoding"],
        params["sample_rate"],
        params["channels"],
    )
    upstream_url = build_upstream_url(settings.upstream.url, ws.query_params)

    async def _connect() -> Endpoint:
        return await runtime_deps.connect_upstream(upstream_url, settings.upstream.api_key)

    client = ClientEndpoint(ws)
    forwarder = DuplexForwarder(
        client,
        session_id=session_id,
        client_log_every=settings.websocket.client_log_every,
        upstream_log_every=settings.websocket.upstream_log_every,
    )
    try:
        await run_relay_session(forwarder, client, _connect)
    finally:
        logger.info(
            "session=%s closed. client_messages=%s upstream_messages=%s dropped=%s",
            session_id,
            forwarder.stats.client_messages,
            forwarder.stats.upstream_messages,
            forwarder.stats.dropped_messages,
        )


__all__ = ["handle_live_transcription"]
