"""Upstream STT URL construction from whitelisted client query params."""

from __future__ import annotations

from collections.abc import Mapping
from urllib.parse import urlsplit, urlencode, urlunsplit

from stt_proxy.config.upstream import UPSTREAM_PARAM_DEFAULTS


def resolve_upstream_params(client_params: Mapping[str, str]) -> dict[str, str]:
    # Unknown client params are ignored so nothing else reaches the upstream query.
    resolved: dict[str, str] = {}
    for name, default in UPSTREAM_PARAM_DEFAULTS.items():
        value = client_params.get(name)
        resolved[name] = default if value is None else str(value)
    return resolved


def build_upstream_url(base_url: str, client_params: Mapping[str, str]) -> str:
    parts = urlsplit(base_url)
    query = urlencode(list(resolve_upstream_params(client_params).items()))
    return urlunsplit((parts.scheme, parts.netloc, parts.path, query, parts.fragment))


__all__ = ["build_upstream_url", "resolve_upstream_params"]
