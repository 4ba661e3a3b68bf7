from __future__ import annotations

from urllib.parse import parse_qsl, urlsplit

from stt_proxy.config.upstream import UPSTREAM_PARAM_DEFAULTS
from stt_proxy.upstream.url import build_upstream_url, resolve_upstream_params

BASE = "wss://api.deepgram.com/v1/listen"


def _query(url: str) -> list[tuple[str, str]]:
    return parse_qsl(urlsplit(url).query, keep_blank_values=True)


def test_defaults_when_client_sends_nothing() -> None:
    url = build_upstream_url(BASE, {})
    assert url.startswith(BASE + "?")
    assert _query(url) == list(UPSTREAM_PARAM_DEFAULTS.items())


def test_client_values_override_defaults_and_unknown_keys_are_dropped() -> None:
    url = build_upstream_url(BASE, {"model": "nova-2", "callback": "https://evil.test", "api_key": "x"})
    query = dict(_query(url))
    assert query["model"] == "nova-2"
    assert query["language"] == "en"
    assert "callback" not in query
    assert "api_key" not in query


def test_every_known_key_appears_exactly_once_in_declaration_order() -> None:
    url = build_upstream_url(BASE, {"channels": "2", "language": "de", "diarize": "true"})
    names = [name for name, _ in _query(url)]
    assert names == list(UPSTREAM_PARAM_DEFAULTS)


def test_values_are_percent_encoded() -> None:
    url = build_upstream_url(BASE, {"language": "en US&model=x"})
    assert "language=en+US%26model%3Dx" in url
    assert dict(_query(url))["model"] == "nova-3"


def test_base_query_is_replaced() -> None:
    url = build_upstream_url(BASE + "?tier=enhanced", {})
    assert "tier" not in dict(_query(url))


def test_empty_client_value_is_forwarded_as_is() -> None:
    assert resolve_upstream_params({"model": ""})["model"] == ""
