"""Configuration module exports (env-resolved constants only)."""

from .websocket import WS_ENDPOINT_PATH
from .upstream import UPSTREAM_PARAM_DEFAULTS

__all__ = [
    "UPSTREAM_PARAM_DEFAULTS",
    "WS_ENDPOINT_PATH",
]
