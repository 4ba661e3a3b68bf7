"""Transport-independent view of one side of a relay session."""

from __future__ import annotations

from typing import Protocol

# str frames travel as text, bytes frames as binary.
Frame = str | bytes


class Endpoint(Protocol):
    async def receive(self) -> Frame:
        """Return the next frame or raise ``EndpointClosed`` when the peer closed."""
        ...

    async def send(self, data: Frame) -> None: ...

    async def close(self, code: int | None = None, reason: str | None = None) -> None: ...


__all__ = ["Endpoint", "Frame"]
