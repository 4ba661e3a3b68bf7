"""Opening the authenticated upstream STT connection."""

from __future__ import annotations

import logging

from websockets.asyncio.client import connect

from stt_proxy.config.upstream import (
    UPSTREAM_AUTH_HEADER,
    UPSTREAM_AUTH_SCHEME,
    DEFAULT_UPSTREAM_OPEN_TIMEOUT_S,
)

from .endpoint import UpstreamEndpoint

logger = logging.getLogger(__name__)


def build_auth_headers(api_key: str) -> dict[str, str]:
    return {UPSTREAM_AUTH_HEADER: f"{UPSTREAM_AUTH_SCHEME} {api_key}"}


async def connect_upstream(
    url: str,
    api_key: str,
    *,
    open_timeout: float = DEFAULT_UPSTREAM_OPEN_TIMEOUT_S,
) -> UpstreamEndpoint:
    connection = await connect(
        url,
        additional_headers=build_auth_headers(api_key),
        open_timeout=open_timeout,
        max_size=None,
    )
    logger.debug("upstream handshake complete url=%s", url)
    return UpstreamEndpoint(connection)


__all__ = ["build_auth_headers", "connect_upstream"]
