"""Testes do EventsDispatcher."""

from __future__ import annotations

import json

import pytest

from api.connectors.slack.events import (
    AppMentionHandler,
    EventsDispatcher,
    MessageBotHandler,
    MessageHandler,
)
from api.connectors.slack.payloads import EventsApiPayload
from api.connectors.slack.webhook import InvalidBodyError


class _RecordingMention(AppMentionHandler):
    def __init__(self) -> None:
        self.received: list[EventsApiPayload] = []

    async def handle(self, payload: EventsApiPayload) -> None:
        self.received.append(payload)


class _SyncMessage(MessageHandler):
    def __init__(self) -> None:
        self.texts: list[str | None] = []

    def handle(self, payload: EventsApiPayload) -> None:
        self.texts.append(payload.event.text)


class _BotMessage(MessageBotHandler):
    def __init__(self) -> None:
        self.count = 0

    def handle(self, payload: EventsApiPayload) -> None:
        self.count += 1


class _Failing(AppMentionHandler):
    def handle(self, payload: EventsApiPayload) -> None:
        raise RuntimeError("falhou")


def _callback(event: dict) -> dict:
    return {"type": "event_callback", "team_id": "T1", "event_id": "Ev1", "event": event}


@pytest.mark.asyncio
async def test_dispatch_runs_all_handlers_in_order() -> None:
    dispatcher = EventsDispatcher()
    first, second = _RecordingMention(), _RecordingMention()
    dispatcher.register(first)
    dispatcher.register(second)

    count = await dispatcher.dispatch(_callback({"type": "app_mention", "text": "oi"}))

    assert count == 2
    assert len(first.received) == 1
    assert len(second.received) == 1
    assert dispatcher.handlers_for("app_mention") == [first, second]


@pytest.mark.asyncio
async def test_dispatch_accepts_raw_json_and_sync_handlers() -> None:
    dispatcher = EventsDispatcher()
    handler = _SyncMessage()
    dispatcher.register(handler)

    raw = json.dumps(_callback({"type": "message", "text": "bom dia"}))
    count = await dispatcher.dispatch(raw)

    assert count == 1
    assert handler.texts == ["bom dia"]


@pytest.mark.asyncio
async def test_dispatch_routes_subtype_separately() -> None:
    dispatcher = EventsDispatcher()
    plain, bot = _SyncMessage(), _BotMessage()
    dispatcher.register(plain)
    dispatcher.register(bot)

    await dispatcher.dispatch(_callback({"type": "message", "subtype": "bot_message", "bot_id": "B1"}))

    assert bot.count == 1
    assert plain.texts == []


@pytest.mark.asyncio
async def test_dispatch_ignores_non_event_callback() -> None:
    dispatcher = EventsDispatcher()
    dispatcher.register(_RecordingMention())

    assert await dispatcher.dispatch({"type": "url_verification", "challenge": "c"}) == 0


@pytest.mark.asyncio
async def test_dispatch_without_handler_returns_zero() -> None:
    assert await EventsDispatcher().dispatch(_callback({"type": "team_join"})) == 0


@pytest.mark.asyncio
async def test_deregister_removes_handler() -> None:
    dispatcher = EventsDispatcher()
    handler = _RecordingMention()
    dispatcher.register(handler)
    dispatcher.deregister(handler)

    assert await dispatcher.dispatch(_callback({"type": "app_mention"})) == 0


@pytest.mark.asyncio
async def test_dispatch_propagates_handler_errors() -> None:
    dispatcher = EventsDispatcher()
    dispatcher.register(_Failing())

    with pytest.raises(RuntimeError, match="falhou"):
        await dispatcher.dispatch(_callback({"type": "app_mention"}))


@pytest.mark.asyncio
@pytest.mark.parametrize("payload", ["[]", b'"texto"', "42", [{"type": "event_callback"}]])
async def test_dispatch_ignores_non_object_payloads(payload: object) -> None:
    dispatcher = EventsDispatcher()
    mention = _RecordingMention()
    dispatcher.register(mention)

    assert await dispatcher.dispatch(payload) == 0  # type: ignore[arg-type]
    assert mention.received == []


@pytest.mark.asyncio
@pytest.mark.parametrize("payload", ["{not json", b"\xff\xfe"])
async def test_dispatch_invalid_json_raises_invalid_body(payload: str | bytes) -> None:
    with pytest.raises(InvalidBodyError, match="invalid_json"):
        await EventsDispatcher().dispatch(payload)
