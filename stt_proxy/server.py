"""Main FastAPI server for the live-transcription session proxy."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, WebSocket
from fastapi.responses import ORJSONResponse
from fastapi.middleware.cors import CORSMiddleware

from stt_proxy.errors import MetadataError
from stt_proxy.state import RuntimeDeps
from stt_proxy.auth.tokens import issue_token
from stt_proxy.config.server import CORS_ALLOW_HEADERS, CORS_ALLOW_METHODS, CORS_ALLOW_ORIGINS
from stt_proxy.state.settings import AppSettings
from stt_proxy.state.runtime import UpstreamConnector
from stt_proxy.runtime.logging import configure_logging
from stt_proxy.config.websocket import WS_ENDPOINT_PATH
from stt_proxy.handlers.metadata import load_metadata
from stt_proxy.runtime.dependencies import build_runtime_deps
from stt_proxy.handlers.websocket.manager import handle_live_transcription

logger = logging.getLogger(__name__)

configure_logging()


def _error_response(message: str) -> ORJSONResponse:
    return ORJSONResponse(status_code=500, content={"error": "INTERNAL_SERVER_ERROR", "message": message})


def _runtime_deps(app: FastAPI) -> RuntimeDeps:
    runtime_deps = getattr(app.state, "runtime_deps", None)
    if runtime_deps is None:
        raise RuntimeError("Runtime dependencies are not initialized")
    return runtime_deps


def create_app(
    *,
    settings: AppSettings | None = None,
    upstream_connector: UpstreamConnector | None = None,
) -> FastAPI:
    @asynccontextmanager
    async def _lifespan(app: FastAPI):
        app.state.runtime_deps = await build_runtime_deps(settings, upstream_connector)
        logger.info("runtime: ready")
        yield

    app = FastAPI(default_response_class=ORJSONResponse, lifespan=_lifespan)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ALLOW_ORIGINS,
        allow_methods=CORS_ALLOW_METHODS,
        allow_headers=CORS_ALLOW_HEADERS,
    )

    @app.get("/api/session")
    async def session_token(request: Request):
        auth = _runtime_deps(request.app).settings.auth
        try:
            token = issue_token(auth.session_secret, expiry_s=auth.token_expiry_s)
        except Exception:
            logger.exception("Failed to issue token")
            return _error_response("Failed to issue session token")
        return {"token": token}

    @app.get("/api/metadata")
    async def metadata(request: Request):
        path = _runtime_deps(request.app).settings.server.metadata_path
        try:
            return load_metadata(path)
        except MetadataError as exc:
            logger.error("Error reading metadata: %s", exc)
            return _error_response(str(exc))

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.websocket(WS_ENDPOINT_PATH)
    async def live_transcription(websocket: WebSocket) -> None:
        await handle_live_transcription(websocket, _runtime_deps(websocket.app))

    return app


app = create_app()

__all__ = ["app", "create_app"]
