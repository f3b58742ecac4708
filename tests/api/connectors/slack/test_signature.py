"""Testes de assinatura X-Slack-Signature."""

from __future__ import annotations

import hashlib
import hmac

from api.connectors.slack.signature import (
    SIGNATURE_HEADER,
    TIMESTAMP_HEADER,
    build_signed_headers,
    generate_slack_signature,
    verify_slack_signature,
)

SECRET = "8f742231b10e8888abcd99yyyzzz85a5"
NOW = 1_531_420_618
BODY = (
    "token=xyzz0WbapA4vBCDEFasx0q6G&team_id=T1DC2JH3J&team_domain=testteamnow"
    "&channel_id=G8PSS9T3V&channel_name=foobar&user_id=U2CERLKJA"
    "&command=%2Fwebhook-collect&text=&response_url=https%3A%2F%2Fhooks.slack.com"
)


def test_generate_slack_signature_matches_hmac_sha256() -> None:
    base = f"v0:{NOW}:{BODY}"
    digest = hmac.new(SECRET.encode(), base.encode(), hashlib.sha256).hexdigest()

    assert generate_slack_signature(SECRET, NOW, BODY) == f"v0={digest}"
    assert generate_slack_signature(SECRET, str(NOW), BODY.encode()) == f"v0={digest}"


def test_verify_valid_signature() -> None:
    headers = build_signed_headers(SECRET, BODY, timestamp=NOW)

    result = verify_slack_signature(BODY, headers, SECRET, now=NOW + 10)

    assert result.valid is True
    assert result.skipped is False
    assert result.error is None


def test_verify_headers_are_case_insensitive() -> None:
    headers = {
        key.lower(): value
        for key, value in build_signed_headers(SECRET, BODY, timestamp=NOW).items()
    }

    assert verify_slack_signature(BODY.encode(), headers, SECRET, now=NOW).valid is True


def test_verify_skipped_without_secret() -> None:
    result = verify_slack_signature(BODY, {}, None)

    assert result.valid is True
    assert result.skipped is True


def test_verify_missing_signature() -> None:
    headers = {TIMESTAMP_HEADER: str(NOW)}

    result = verify_slack_signature(BODY, headers, SECRET, now=NOW)

    assert result.valid is False
    assert result.error == "missing_signature"


def test_verify_missing_timestamp() -> None:
    headers = {SIGNATURE_HEADER: "v0=abc"}

    result = verify_slack_signature(BODY, headers, SECRET, now=NOW)

    assert result.error == "missing_timestamp"


def test_verify_invalid_timestamp() -> None:
    headers = {SIGNATURE_HEADER: "v0=abc", TIMESTAMP_HEADER: "ontem"}

    result = verify_slack_signature(BODY, headers, SECRET, now=NOW)

    assert result.error == "invalid_timestamp"


def test_verify_stale_timestamp_is_rejected_even_with_valid_signature() -> None:
    headers = build_signed_headers(SECRET, BODY, timestamp=NOW)

    result = verify_slack_signature(BODY, headers, SECRET, now=NOW + 301)

    assert result.valid is False
    assert result.error == "stale_timestamp"


def test_verify_custom_tolerance() -> None:
    headers = build_signed_headers(SECRET, BODY, timestamp=NOW)

    result = verify_slack_signature(BODY, headers, SECRET, now=NOW + 30, tolerance_seconds=10)

    assert result.error == "stale_timestamp"


def test_verify_signature_mismatch_on_tampered_body() -> None:
    headers = build_signed_headers(SECRET, BODY, timestamp=NOW)

    result = verify_slack_signature(BODY + "&extra=1", headers, SECRET, now=NOW)

    assert result.valid is False
    assert result.error == "signature_mismatch"


def test_verify_signs_raw_bytes_without_decoding() -> None:
    """Corpo fora de UTF-8 é assinado byte a byte."""
    body = b"text=caf\xe9&user_id=U1"
    base = f"v0:{NOW}:".encode() + body
    digest = hmac.new(SECRET.encode(), base, hashlib.sha256).hexdigest()
    headers = {SIGNATURE_HEADER: f"v0={digest}", TIMESTAMP_HEADER: str(NOW)}

    assert generate_slack_signature(SECRET, NOW, body) == f"v0={digest}"
    assert verify_slack_signature(body, headers, SECRET, now=NOW).valid is True
    replaced = b"text=caf\xef\xbf\xbd&user_id=U1"
    assert verify_slack_signature(replaced, headers, SECRET, now=NOW).valid is False
