"""Shared error types for the STT session proxy."""

from __future__ import annotations


class ConfigurationError(RuntimeError):
    """Raised at startup when required configuration is missing."""


class MetadataError(RuntimeError):
    """Raised when the metadata document cannot be served."""


__all__ = ["ConfigurationError", "MetadataError"]
