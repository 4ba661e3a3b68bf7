"""Runtime dependency construction (settings + upstream connector)."""

from __future__ import annotations

import logging
from functools import partial

from stt_proxy.state import RuntimeDeps
from stt_proxy.state.settings import AppSettings
from stt_proxy.state.runtime import UpstreamConnector
from stt_proxy.upstream.connector import connect_upstream

from .settings import load_settings

logger = logging.getLogger(__name__)


async def build_runtime_deps(
    settings: AppSettings | None = None,
    upstream_connector: UpstreamConnector | None = None,
) -> RuntimeDeps:
    if settings is None:
        settings = load_settings()

    if upstream_connector is None:
        upstream_connector = partial(connect_upstream, open_timeout=settings.upstream.open_timeout_s)

    logger.info("runtime: upstream=%s", settings.upstream.url)
    return RuntimeDeps(settings=settings, connect_upstream=upstream_connector)


__all__ = ["RuntimeDeps", "build_runtime_deps"]
