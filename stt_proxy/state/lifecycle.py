"""Relay session lifecycle states."""

from __future__ import annotations

from enum import Enum


class SessionState(str, Enum):
    """Pending -> Active -> Closing -> Closed.

    Pending skips straight to Closing when the upstream never opens.
    """

    PENDING = "pending"
    ACTIVE = "active"
    CLOSING = "closing"
    CLOSED = "closed"


__all__ = ["SessionState"]
