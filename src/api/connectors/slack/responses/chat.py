"""Respostas de chat.*."""

from __future__ import annotations

from api.connectors.slack.models import Message

from .base import SlackApiResponse


class ChatPostMessageResponse(SlackApiResponse):
    channel: str | None = None
    ts: str | None = None
    message: Message | None = None


class ChatPostEphemeralResponse(SlackApiResponse):
    message_ts: str | None = None


class ChatUpdateResponse(SlackApiResponse):
    channel: str | None = None
    ts: str | None = None
    text: str | None = None
    message: Message | None = None


class ChatDeleteResponse(SlackApiResponse):
    channel: str | None = None
    ts: str | None = None


class ChatGetPermalinkResponse(SlackApiResponse):
    channel: str | None = None
    permalink: str | None = None


class ChatScheduleMessageResponse(SlackApiResponse):
    channel: str | None = None
    scheduled_message_id: str | None = None
    post_at: int | None = None
    message: Message | None = None


class ChatDeleteScheduledMessageResponse(SlackApiResponse):
    pass


class ChatMeMessageResponse(SlackApiResponse):
    channel: str | None = None
    ts: str | None = None
