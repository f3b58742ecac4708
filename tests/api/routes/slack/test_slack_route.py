"""Testes do endpoint HTTP do Slack."""

from __future__ import annotations

import json
import logging

import pytest
from starlette.requests import Request

from api.routes.slack import create_slack_router
from app.bolt import App, AppConfig
from app.observability import get_correlation_id
from tests.fakes.fake_slack_api import (
    FORM,
    JSON,
    SIGNING_SECRET,
    FakeSlackApi,
    command_body,
    event_body,
    signed_headers,
)


def _build_request(body: bytes, headers: dict[str, str], path: str = "/slack/events") -> Request:
    raw_headers = [(k.lower().encode("utf-8"), v.encode("utf-8")) for k, v in headers.items()]
    scope = {
        "type": "http",
        "asgi": {"version": "3.0"},
        "http_version": "1.1",
        "method": "POST",
        "path": path,
        "raw_path": path.encode("utf-8"),
        "query_string": b"",
        "headers": raw_headers,
    }
    sent = False

    async def _receive() -> dict[str, object]:
        nonlocal sent
        if sent:
            return {"type": "http.request", "body": b"", "more_body": False}
        sent = True
        return {"type": "http.request", "body": body, "more_body": False}

    return Request(scope, _receive)


def _bolt_app() -> App:
    api = FakeSlackApi()
    return App(
        AppConfig(signing_secret=SIGNING_SECRET),
        client=api.methods_client(token=None),
        http_client=api.http_client(),
    )


def _endpoint(bolt_app: App, path: str = "/slack/events"):
    router = create_slack_router(bolt_app, path)
    route = router.routes[0]
    assert route.path == path
    assert route.methods == {"POST"}
    return route.endpoint


@pytest.mark.asyncio
async def test_command_is_routed_and_converted() -> None:
    bolt_app = _bolt_app().command("/hello", lambda req, ctx: ctx.ack("oi"))
    body = command_body("/hello")

    response = await _endpoint(bolt_app)(_build_request(body.encode(), signed_headers(body, FORM)))

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("application/json")
    assert json.loads(response.body) == {"text": "oi"}


@pytest.mark.asyncio
async def test_invalid_signature_returns_401() -> None:
    body = command_body("/hello")
    headers = signed_headers(body, FORM, secret="wrong")

    response = await _endpoint(_bolt_app())(_build_request(body.encode(), headers))

    assert response.status_code == 401
    assert json.loads(response.body) == {"error": "invalid request"}


@pytest.mark.asyncio
async def test_unrecognized_body_returns_400() -> None:
    response = await _endpoint(_bolt_app())(
        _build_request(b"foo=bar", {"content-type": FORM})
    )

    assert response.status_code == 400


@pytest.mark.asyncio
async def test_correlation_id_is_event_id_during_handler() -> None:
    seen: list[str] = []
    bolt_app = _bolt_app().event("app_mention", lambda req, ctx: seen.append(get_correlation_id()))
    body = event_body({"type": "app_mention", "user": "U1", "text": "oi"}, event_id="Ev42")

    response = await _endpoint(bolt_app)(_build_request(body.encode(), signed_headers(body, JSON)))

    assert response.status_code == 200
    assert seen == ["Ev42"]
    assert get_correlation_id() == ""


@pytest.mark.asyncio
async def test_correlation_id_header_takes_precedence(caplog: pytest.LogCaptureFixture) -> None:
    seen: list[str] = []
    bolt_app = _bolt_app().command("/hello", lambda req, ctx: seen.append(get_correlation_id()))
    body = command_body("/hello")
    headers = {**signed_headers(body, FORM), "X-Correlation-Id": "corr-1"}

    with caplog.at_level(logging.INFO):
        await _endpoint(bolt_app)(_build_request(body.encode(), headers))

    assert seen == ["corr-1"]
    assert "slack_request_received" in caplog.messages


@pytest.mark.asyncio
async def test_custom_path() -> None:
    bolt_app = _bolt_app().command("/hello", lambda req, ctx: None)
    body = command_body("/hello")

    endpoint = _endpoint(bolt_app, "/integrations/slack")
    response = await endpoint(_build_request(body.encode(), signed_headers(body, FORM), "/integrations/slack"))

    assert response.status_code == 200
