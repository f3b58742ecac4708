"""Testes do Context (ack, respond, say)."""

from __future__ import annotations

import pytest

from app.bolt import Context, build_request
from tests.fakes.fake_slack_api import (
    BOT_TOKEN,
    FORM,
    FakeSlackApi,
    command_body,
    interactive_body,
    shortcut_payload,
)


def _context(body: str, api: FakeSlackApi, bot_token: str | None = BOT_TOKEN) -> Context:
    request = build_request(body, {"content-type": FORM})
    assert request is not None
    return Context(
        request,
        client=api.methods_client(token=None),
        http_client=api.http_client(),
        bot_token=bot_token,
    )


def test_context_exposes_request_fields() -> None:
    context = _context(command_body("/hello"), FakeSlackApi())

    assert context.team_id == "T1"
    assert context.request_user_id == "U1"
    assert context.channel_id == "C1"
    assert context.response_url == "https://hooks.slack.test/commands/T1/1/abc"
    assert context.retry_num is None
    assert context.bot_user_id is None


def test_ack_without_arguments_is_empty_200() -> None:
    response = _context(command_body("/hello"), FakeSlackApi()).ack()

    assert response.status_code == 200
    assert response.body == ""


def test_ack_with_text() -> None:
    response = _context(command_body("/hello"), FakeSlackApi()).ack(
        "Olá!", response_type="in_channel"
    )

    assert response.status_code == 200
    assert response.json_body() == {"text": "Olá!", "response_type": "in_channel"}


def test_ack_with_options_and_view_errors() -> None:
    context = _context(command_body("/hello"), FakeSlackApi())

    options = context.ack(options=[{"text": {"type": "plain_text", "text": "A"}, "value": "a"}])
    errors = context.ack(response_action="errors", errors={"b1": "obrigatório"})

    assert options.json_body() == {
        "options": [{"text": {"type": "plain_text", "text": "A"}, "value": "a"}]
    }
    assert errors.json_body() == {"response_action": "errors", "errors": {"b1": "obrigatório"}}


def test_ack_with_raw_body() -> None:
    response = _context(command_body("/hello"), FakeSlackApi()).ack(body={"custom": True})

    assert response.json_body() == {"custom": True}


@pytest.mark.asyncio
async def test_respond_posts_to_response_url() -> None:
    api = FakeSlackApi()
    context = _context(command_body("/hello"), api)

    result = await context.respond("processado", replace_original=True)

    assert result == "ok"
    assert api.response_url_posts == [{"text": "processado", "replace_original": True}]


@pytest.mark.asyncio
async def test_respond_without_response_url_raises() -> None:
    context = _context(interactive_body(shortcut_payload("x")), FakeSlackApi())

    with pytest.raises(ValueError, match="response_url"):
        await context.respond("oi")


@pytest.mark.asyncio
async def test_say_posts_to_request_channel_with_bot_token() -> None:
    api = FakeSlackApi()
    context = _context(command_body("/hello"), api)

    response = await context.say("oi", thread_ts="1.0")

    assert response.ok is True
    method, form, authorization = api.calls[-1]
    assert method == "chat.postMessage"
    assert form == {"channel": "C1", "text": "oi", "thread_ts": "1.0"}
    assert authorization == f"Bearer {BOT_TOKEN}"


@pytest.mark.asyncio
async def test_say_without_channel_raises() -> None:
    context = _context(interactive_body(shortcut_payload("x")), FakeSlackApi())

    with pytest.raises(ValueError, match="channel"):
        await context.say("oi")
