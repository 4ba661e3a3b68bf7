"""Runtime settings (dataclasses only)."""

from __future__ import annotations

from pathlib import Path
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class AuthSettings:
    session_secret: str
    token_expiry_s: int


@dataclass(frozen=True, slots=True)
class UpstreamSettings:
    url: str
    api_key: str
    open_timeout_s: float


@dataclass(frozen=True, slots=True)
class ServerSettings:
    host: str
    port: int
    metadata_path: Path


@dataclass(frozen=True, slots=True)
class WebSocketSettings:
    client_log_every: int
    upstream_log_every: int


@dataclass(frozen=True, slots=True)
class AppSettings:
    auth: AuthSettings
    upstream: UpstreamSettings
    server: ServerSettings
    websocket: WebSocketSettings


__all__ = [
    "AppSettings",
    "AuthSettings",
    "ServerSettings",
    "UpstreamSettings",
    "WebSocketSettings",
]
