from __future__ import annotations

import pytest

from stt_proxy.auth.tokens import issue_token
from stt_proxy.handlers.websocket.auth import parse_protocols, select_access_token_protocol

SECRET = "test-session-secret"


def test_parse_protocols_accepts_header_string_and_list() -> None:
    assert parse_protocols("a, b ,c") == ["a", "b", "c"]
    assert parse_protocols([" a", "b "]) == ["a", "b"]
    assert parse_protocols(None) == []
    assert parse_protocols("") == []
    assert parse_protocols("a,,b") == ["a", "b"]


def test_selects_full_protocol_entry_among_unrelated_offers() -> None:
    entry = f"access_token.{issue_token(SECRET)}"
    assert select_access_token_protocol(["json", entry, "binary"], SECRET) == entry


def test_selects_from_raw_header_value() -> None:
    entry = f"access_token.{issue_token(SECRET)}"
    assert select_access_token_protocol(f"json, {entry}", SECRET) == entry


def test_first_valid_entry_wins() -> None:
    invalid = "access_token.garbage"
    valid = f"access_token.{issue_token(SECRET)}"
    assert select_access_token_protocol([invalid, valid], SECRET) == valid


@pytest.mark.parametrize(
    "offered",
    [
        [],
        ["json", "binary"],
        ["access_token.garbage"],
        ["access_token."],
        ["token.abc"],
    ],
)
def test_no_token_when_nothing_validates(offered: list[str]) -> None:
    assert select_access_token_protocol(offered, SECRET) is None


def test_token_for_other_secret_is_not_selected() -> None:
    entry = f"access_token.{issue_token('other-secret')}"
    assert select_access_token_protocol([entry], SECRET) is None


def test_prefix_must_lead_the_entry() -> None:
    token = issue_token(SECRET)
    assert select_access_token_protocol([f"x-access_token.{token}"], SECRET) is None
