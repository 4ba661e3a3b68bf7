"""Process entry point: ``python -m stt_proxy``."""

from __future__ import annotations

import sys
import logging

from dotenv import load_dotenv

# config/* resolves env at import time, so .env must be loaded first.
load_dotenv()

import uvicorn  # noqa: E402

from stt_proxy.errors import ConfigurationError  # noqa: E402
from stt_proxy.server import create_app  # noqa: E402
from stt_proxy.runtime.logging import configure_logging  # noqa: E402
from stt_proxy.runtime.settings import load_settings  # noqa: E402

logger = logging.getLogger("stt_proxy")


def main() -> int:
    configure_logging()
    try:
        settings = load_settings()
    except ConfigurationError as exc:
        logger.error("ERROR: %s", exc)
        logger.error("Please copy sample.env to .env and add your API key")
        return 1

    logger.info("Starting server on %s:%s", settings.server.host, settings.server.port)
    uvicorn.run(create_app(settings=settings), host=settings.server.host, port=settings.server.port)
    return 0


if __name__ == "__main__":
    sys.exit(main())
