from .errors import EndpointClosed
from .client import ClientEndpoint
from .session import run_relay_session
from .endpoint import Frame, Endpoint
from .forwarder import DuplexForwarder

__all__ = [
    "ClientEndpoint",
    "DuplexForwarder",
    "Endpoint",
    "EndpointClosed",
    "Frame",
    "run_relay_session",
]
