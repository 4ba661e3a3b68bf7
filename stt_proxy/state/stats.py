"""Per-session message accounting (observability only)."""

from __future__ import annotations

from dataclasses import dataclass

from .side import Side


@dataclass(slots=True)
class SessionStats:
    client_messages: int = 0
    upstream_messages: int = 0
    dropped_messages: int = 0

    def record(self, side: Side) -> int:
        """Count a frame received on *side* and return that side's running total."""
        if side is Side.CLIENT:
            self.client_messages += 1
            return self.client_messages
        self.upstream_messages += 1
        return self.upstream_messages


__all__ = ["SessionStats"]
