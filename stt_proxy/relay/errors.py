"""Relay error types (dataclasses only)."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, eq=False)
class EndpointClosed(Exception):
    """Raised by ``Endpoint.receive`` once the peer's close has been observed."""

    code: int | None = None
    reason: str | None = None


__all__ = ["EndpointClosed"]
