"""Project metadata document served at /api/metadata."""

from __future__ import annotations

import tomllib
from typing import Any
from pathlib import Path

from stt_proxy.errors import MetadataError
from stt_proxy.config.server import METADATA_SECTION


def load_metadata(path: Path, *, section: str = METADATA_SECTION) -> dict[str, Any]:
    try:
        with path.open("rb") as fh:
            config = tomllib.load(fh)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise MetadataError(f"Failed to read metadata from {path.name}") from exc

    meta = config.get(section)
    if not isinstance(meta, dict):
        raise MetadataError(f"Missing [{section}] section in {path.name}")
    return meta


__all__ = ["load_metadata"]
