"""Testes de classificação de erros `ok: false`."""

from __future__ import annotations

import pytest

from api.connectors.slack.slack_errors import is_permanent_error, parse_slack_error


def test_parse_slack_error_returns_none_on_success() -> None:
    assert parse_slack_error("chat.postMessage", {"ok": True, "ts": "1.0"}) is None


def test_parse_slack_error_extracts_scope_details() -> None:
    error = parse_slack_error(
        "chat.postMessage",
        {
            "ok": False,
            "error": "missing_scope",
            "needed": "chat:write",
            "provided": "channels:read",
        },
    )

    assert error is not None
    assert error.method == "chat.postMessage"
    assert error.error == "missing_scope"
    assert error.needed == "chat:write"
    assert error.provided == "channels:read"
    assert error.is_permanent is True


def test_parse_slack_error_without_error_code() -> None:
    error = parse_slack_error("auth.test", {"ok": False})

    assert error is not None
    assert error.error == "unknown_error"


@pytest.mark.parametrize(
    ("code", "permanent"),
    [
        ("invalid_auth", True),
        ("channel_not_found", True),
        ("ratelimited", False),
        ("internal_error", False),
        ("something_new", True),
    ],
)
def test_is_permanent_error(code: str, permanent: bool) -> None:
    assert is_permanent_error(code) is permanent
