from __future__ import annotations

import dataclasses
from pathlib import Path

import pytest
from fakes import FakeEndpoint, RecordingConnector
from fastapi.testclient import TestClient
from starlette.testclient import WebSocketDenialResponse
from starlette.websockets import WebSocketDisconnect

from stt_proxy.server import create_app
from stt_proxy.auth.tokens import issue_token, validate_token
from stt_proxy.state.settings import AppSettings

SECRET = "test-session-secret"
PATH = "/api/live-transcription"


def _echo(endpoint: FakeEndpoint) -> None:
    endpoint.on_send = lambda ep, data: ep.feed(data)


def _token_protocol(secret: str = SECRET) -> str:
    return f"access_token.{issue_token(secret)}"


@pytest.fixture
def connector() -> RecordingConnector:
    return RecordingConnector(_echo)


@pytest.fixture
def client(settings: AppSettings, connector: RecordingConnector):
    with TestClient(create_app(settings=settings, upstream_connector=connector)) as test_client:
        yield test_client


def test_health(client: TestClient) -> None:
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_session_issues_valid_token(client: TestClient) -> None:
    response = client.get("/api/session")

    assert response.status_code == 200
    token = response.json()["token"]
    assert validate_token(token, SECRET)
    assert not validate_token(token, "another-secret")


def test_metadata(client: TestClient) -> None:
    response = client.get("/api/metadata")
    assert response.status_code == 200
    assert response.json()["title"] == "Live Transcription"


def test_metadata_missing_section(settings: AppSettings, tmp_path: Path) -> None:
    path = tmp_path / "deepgram.toml"
    path.write_text('[other]\ntitle = "x"\n', encoding="utf-8")
    server = dataclasses.replace(settings.server, metadata_path=path)
    app = create_app(settings=dataclasses.replace(settings, server=server), upstream_connector=RecordingConnector())

    with TestClient(app) as test_client:
        response = test_client.get("/api/metadata")

    assert response.status_code == 500
    assert response.json() == {
        "error": "INTERNAL_SERVER_ERROR",
        "message": "Missing [meta] section in deepgram.toml",
    }


def test_metadata_unreadable(settings: AppSettings, tmp_path: Path) -> None:
    server = dataclasses.replace(settings.server, metadata_path=tmp_path / "absent.toml")
    app = create_app(settings=dataclasses.replace(settings, server=server), upstream_connector=RecordingConnector())

    with TestClient(app) as test_client:
        response = test_client.get("/api/metadata")

    assert response.status_code == 500
    assert response.json()["error"] == "INTERNAL_SERVER_ERROR"


def test_cors_preflight(client: TestClient) -> None:
    response = client.options(
        "/api/session",
        headers={"Origin": "http://localhost:5173", "Access-Control-Request-Method": "GET"},
    )
    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "*"


def test_valid_token_is_echoed_as_subprotocol(client: TestClient, connector: RecordingConnector) -> None:
    protocol = _token_protocol()

    with client.websocket_connect(PATH, subprotocols=["other", protocol]) as ws:
        assert ws.accepted_subprotocol == protocol
        ws.send_bytes(b"\x00\x01")
        assert ws.receive_bytes() == b"\x00\x01"

    assert len(connector.calls) == 1


@pytest.mark.parametrize(
    "subprotocols",
    [
        None,
        ["access_token.garbage"],
        ["access_token."],
        ["other", "access_token.a.b.c"],
    ],
)
def test_invalid_token_is_rejected_before_upgrade(
    client: TestClient, connector: RecordingConnector, subprotocols: list[str] | None
) -> None:
    with pytest.raises(WebSocketDenialResponse) as excinfo:
        with client.websocket_connect(PATH, subprotocols=subprotocols):
            pass

    assert excinfo.value.status_code == 401
    assert excinfo.value.text == "Unauthorized"
    assert connector.calls == []


def test_token_signed_with_other_secret_is_rejected(client: TestClient, connector: RecordingConnector) -> None:
    with pytest.raises(WebSocketDenialResponse) as excinfo:
        with client.websocket_connect(PATH, subprotocols=[_token_protocol("not-the-secret")]):
            pass

    assert excinfo.value.status_code == 401
    assert connector.calls == []


def test_query_params_are_filtered_and_defaulted(client: TestClient, connector: RecordingConnector) -> None:
    with client.websocket_connect(f"{PATH}?model=nova-2&foo=bar", subprotocols=[_token_protocol()]) as ws:
        ws.send_text("ping")
        assert ws.receive_text() == "ping"

    url, api_key = connector.calls[0]
    assert url.startswith("wss://stt.example.test/v1/listen?")
    assert "model=nova-2" in url
    assert "language=en" in url
    assert "sample_rate=16000" in url
    assert "foo" not in url
    assert api_key == "dg-test-key"


def test_audio_in_transcript_out(settings: AppSettings) -> None:
    reply = '{"type": "Results", "is_final": true}'

    def _script(endpoint: FakeEndpoint) -> None:
        endpoint.on_send = lambda ep, _data: ep.feed(reply) if len(ep.sent) == 3 else None

    connector = RecordingConnector(_script)
    app = create_app(settings=settings, upstream_connector=connector)
    with TestClient(app) as test_client:
        with test_client.websocket_connect(PATH, subprotocols=[_token_protocol()]) as ws:
            for chunk in (b"\x01" * 320, b"\x02" * 320, b"\x03" * 320):
                ws.send_bytes(chunk)
            assert ws.receive_text() == reply

    assert connector.endpoints[0].sent == [b"\x01" * 320, b"\x02" * 320, b"\x03" * 320]


def test_upstream_close_is_propagated(settings: AppSettings) -> None:
    connector = RecordingConnector(lambda endpoint: endpoint.feed_close(1011, "boom"))
    app = create_app(settings=settings, upstream_connector=connector)

    with TestClient(app) as test_client:
        with test_client.websocket_connect(PATH, subprotocols=[_token_protocol()]) as ws:
            with pytest.raises(WebSocketDisconnect) as excinfo:
                ws.receive_text()

    assert excinfo.value.code == 1011
    assert excinfo.value.reason == "boom"


def test_upstream_connect_failure_closes_client(settings: AppSettings) -> None:
    connector = RecordingConnector(error=OSError("connection refused"))
    app = create_app(settings=settings, upstream_connector=connector)

    with TestClient(app) as test_client:
        with test_client.websocket_connect(PATH, subprotocols=[_token_protocol()]) as ws:
            with pytest.raises(WebSocketDisconnect) as excinfo:
                ws.receive_bytes()

    assert excinfo.value.code == 1011
    assert len(connector.calls) == 1
