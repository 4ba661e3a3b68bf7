"""Authenticated WebSocket relay between browser clients and a streaming STT service."""

__version__ = "0.1.0"

__all__ = ["__version__"]
