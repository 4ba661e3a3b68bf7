"""Typed runtime state objects for dependency wiring."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING
from collections.abc import Callable, Awaitable

if TYPE_CHECKING:
    from stt_proxy.relay.endpoint import Endpoint
    from stt_proxy.state.settings import AppSettings

# (url, api_key) -> open upstream endpoint
UpstreamConnector = Callable[[str, str], Awaitable["Endpoint"]]


@dataclass(frozen=True, slots=True)
class RuntimeDeps:
    settings: AppSettings
    connect_upstream: UpstreamConnector


__all__ = ["RuntimeDeps", "UpstreamConnector"]
