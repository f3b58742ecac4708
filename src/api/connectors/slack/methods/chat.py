"""chat.*"""

from __future__ import annotations

from typing import Any

from api.connectors.slack.responses import (
    ChatDeleteResponse,
    ChatDeleteScheduledMessageResponse,
    ChatGetPermalinkResponse,
    ChatMeMessageResponse,
    ChatPostEphemeralResponse,
    ChatPostMessageResponse,
    ChatScheduleMessageResponse,
    ChatUpdateResponse,
)

from .base import BaseMethods, require, require_one_of


class ChatMethods(BaseMethods):
    async def chat_post_message(
        self,
        *,
        channel: str,
        text: str | None = None,
        blocks: list[dict[str, Any]] | None = None,
        attachments: list[dict[str, Any]] | None = None,
        thread_ts: str | None = None,
        token: str | None = None,
        **params: Any,
    ) -> ChatPostMessageResponse:
        """Publica mensagem em canal, DM ou thread.

        `text` continua recomendado junto de `blocks` (usado em notificações).
        """
        require("chat.postMessage", channel=channel)
        require_one_of("chat.postMessage", text=text, blocks=blocks, attachments=attachments)
        params.update(
            channel=channel,
            text=text,
            blocks=blocks,
            attachments=attachments,
            thread_ts=thread_ts,
        )
        return await self._call("chat.postMessage", ChatPostMessageResponse, params, token=token)

    async def chat_post_ephemeral(
        self,
        *,
        channel: str,
        user: str,
        text: str | None = None,
        blocks: list[dict[str, Any]] | None = None,
        attachments: list[dict[str, Any]] | None = None,
        token: str | None = None,
        **params: Any,
    ) -> ChatPostEphemeralResponse:
        require("chat.postEphemeral", channel=channel, user=user)
        require_one_of("chat.postEphemeral", text=text, blocks=blocks, attachments=attachments)
        params.update(
            channel=channel, user=user, text=text, blocks=blocks, attachments=attachments
        )
        return await self._call(
            "chat.postEphemeral", ChatPostEphemeralResponse, params, token=token
        )

    async def chat_update(
        self,
        *,
        channel: str,
        ts: str,
        text: str | None = None,
        blocks: list[dict[str, Any]] | None = None,
        attachments: list[dict[str, Any]] | None = None,
        token: str | None = None,
        **params: Any,
    ) -> ChatUpdateResponse:
        require("chat.update", channel=channel, ts=ts)
        params.update(channel=channel, ts=ts, text=text, blocks=blocks, attachments=attachments)
        return await self._call("chat.update", ChatUpdateResponse, params, token=token)

    async def chat_delete(
        self, *, channel: str, ts: str, token: str | None = None, **params: Any
    ) -> ChatDeleteResponse:
        require("chat.delete", channel=channel, ts=ts)
        params.update(channel=channel, ts=ts)
        return await self._call("chat.delete", ChatDeleteResponse, params, token=token)

    async def chat_get_permalink(
        self, *, channel: str, message_ts: str, token: str | None = None, **params: Any
    ) -> ChatGetPermalinkResponse:
        require("chat.getPermalink", channel=channel, message_ts=message_ts)
        params.update(channel=channel, message_ts=message_ts)
        return await self._call("chat.getPermalink", ChatGetPermalinkResponse, params, token=token)

    async def chat_schedule_message(
        self,
        *,
        channel: str,
        post_at: int,
        text: str | None = None,
        blocks: list[dict[str, Any]] | None = None,
        token: str | None = None,
        **params: Any,
    ) -> ChatScheduleMessageResponse:
        require("chat.scheduleMessage", channel=channel, post_at=post_at)
        require_one_of("chat.scheduleMessage", text=text, blocks=blocks)
        params.update(channel=channel, post_at=post_at, text=text, blocks=blocks)
        return await self._call(
            "chat.scheduleMessage", ChatScheduleMessageResponse, params, token=token
        )

    async def chat_delete_scheduled_message(
        self,
        *,
        channel: str,
        scheduled_message_id: str,
        token: str | None = None,
        **params: Any,
    ) -> ChatDeleteScheduledMessageResponse:
        require(
            "chat.deleteScheduledMessage",
            channel=channel,
            scheduled_message_id=scheduled_message_id,
        )
        params.update(channel=channel, scheduled_message_id=scheduled_message_id)
        return await self._call(
            "chat.deleteScheduledMessage", ChatDeleteScheduledMessageResponse, params, token=token
        )

    async def chat_me_message(
        self, *, channel: str, text: str, token: str | None = None, **params: Any
    ) -> ChatMeMessageResponse:
        require("chat.meMessage", channel=channel, text=text)
        params.update(channel=channel, text=text)
        return await self._call("chat.meMessage", ChatMeMessageResponse, params, token=token)
