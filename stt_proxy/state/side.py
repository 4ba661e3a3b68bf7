"""The two ends of a relay session."""

from __future__ import annotations

from enum import Enum


class Side(str, Enum):
    CLIENT = "client"
    UPSTREAM = "upstream"

    @property
    def peer(self) -> Side:
        return Side.UPSTREAM if self is Side.CLIENT else Side.CLIENT


__all__ = ["Side"]
