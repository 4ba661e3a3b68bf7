from __future__ import annotations

from pathlib import Path

import pytest

from stt_proxy.state.settings import (
    AppSettings,
    AuthSettings,
    ServerSettings,
    UpstreamSettings,
    WebSocketSettings,
)


@pytest.fixture
def metadata_file(tmp_path: Path) -> Path:
    path = tmp_path / "deepgram.toml"
    path.write_text('[meta]\ntitle = "Live Transcription"\nuseCase = "live-transcription"\n', encoding="utf-8")
    return path


@pytest.fixture
def settings(metadata_file: Path) -> AppSettings:
    return AppSettings(
        auth=AuthSettings(session_secret="test-session-secret", token_expiry_s=3600),
        upstream=UpstreamSettings(url="wss://stt.example.test/v1/listen", api_key="dg-test-key", open_timeout_s=5.0),
        server=ServerSettings(host="127.0.0.1", port=8081, metadata_path=metadata_file),
        websocket=WebSocketSettings(client_log_every=1, upstream_log_every=1),
    )
