from .url import build_upstream_url, resolve_upstream_params
from .endpoint import UpstreamEndpoint
from .connector import build_auth_headers, connect_upstream

__all__ = [
    "UpstreamEndpoint",
    "build_auth_headers",
    "build_upstream_url",
    "connect_upstream",
    "resolve_upstream_params",
]
