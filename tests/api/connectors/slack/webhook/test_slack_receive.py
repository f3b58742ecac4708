import json
from urllib.parse import urlencode

import pytest

from api.connectors.slack.signature import build_signed_headers
from api.connectors.slack.webhook.receive import (
    InvalidBodyError,
    InvalidSignatureError,
    decode_body,
    parse_form,
    parse_webhook_request,
)

SECRET = "secret"
NOW = 1_700_000_000


def test_parse_webhook_request_json_ok() -> None:
    body = json.dumps({"type": "event_callback", "event": {"type": "app_mention"}})
    headers = {"Content-Type": "application/json", **build_signed_headers(SECRET, body, NOW)}

    payload, result = parse_webhook_request(body.encode("utf-8"), headers, SECRET, now=NOW)

    assert payload["event"]["type"] == "app_mention"
    assert result.valid is True


def test_parse_webhook_request_invalid_signature() -> None:
    body = "command=%2Fhello"
    headers = {
        "X-Slack-Signature": "v0=deadbeef",
        "X-Slack-Request-Timestamp": str(NOW),
    }

    with pytest.raises(InvalidSignatureError) as exc_info:
        parse_webhook_request(body, headers, SECRET, now=NOW)

    assert "signature_mismatch" in str(exc_info.value)


def test_parse_webhook_request_invalid_json() -> None:
    body = "{invalid}"
    headers = {"content-type": "application/json", **build_signed_headers(SECRET, body, NOW)}

    with pytest.raises(InvalidBodyError) as exc_info:
        parse_webhook_request(body, headers, SECRET, now=NOW)

    assert "invalid_json" in str(exc_info.value)


def test_decode_body_slash_command_form() -> None:
    body = urlencode({"command": "/hello", "text": "mundo", "user_id": "U1"})

    assert decode_body(body, "application/x-www-form-urlencoded") == {
        "command": "/hello",
        "text": "mundo",
        "user_id": "U1",
    }


def test_decode_body_interactive_payload_field() -> None:
    inner = {"type": "shortcut", "callback_id": "open-modal"}
    body = urlencode({"payload": json.dumps(inner)})

    assert decode_body(body, "application/x-www-form-urlencoded") == inner


def test_decode_body_json_without_content_type() -> None:
    assert decode_body('{"type": "url_verification", "challenge": "c"}') == {
        "type": "url_verification",
        "challenge": "c",
    }


def test_decode_body_rejects_non_object_json() -> None:
    with pytest.raises(InvalidBodyError):
        decode_body("[1, 2]", "application/json")


def test_decode_body_rejects_invalid_encoding() -> None:
    with pytest.raises(InvalidBodyError):
        decode_body(b"\xff\xfe", "")


def test_parse_form_keeps_blank_values() -> None:
    assert parse_form("text=&command=%2Fx") == {"text": "", "command": "/x"}
