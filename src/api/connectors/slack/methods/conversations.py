"""conversations.*"""

from __future__ import annotations

from typing import Any

from api.connectors.slack.responses import (
    ConversationsArchiveResponse,
    ConversationsCloseResponse,
    ConversationsCreateResponse,
    ConversationsHistoryResponse,
    ConversationsInfoResponse,
    ConversationsInviteResponse,
    ConversationsJoinResponse,
    ConversationsKickResponse,
    ConversationsLeaveResponse,
    ConversationsListResponse,
    ConversationsMembersResponse,
    ConversationsOpenResponse,
    ConversationsRenameResponse,
    ConversationsRepliesResponse,
    ConversationsSetPurposeResponse,
    ConversationsSetTopicResponse,
    ConversationsUnarchiveResponse,
)

from .base import BaseMethods, require, require_one_of


def _join_ids(values: list[str] | str | None) -> str | None:
    if values is None or isinstance(values, str):
        return values
    return ",".join(values)


class ConversationsMethods(BaseMethods):
    async def conversations_list(
        self,
        *,
        types: list[str] | str | None = None,
        exclude_archived: bool | None = None,
        token: str | None = None,
        **params: Any,
    ) -> ConversationsListResponse:
        params.update(types=_join_ids(types), exclude_archived=exclude_archived)
        return await self._call(
            "conversations.list", ConversationsListResponse, params, token=token
        )

    async def conversations_info(
        self, *, channel: str, token: str | None = None, **params: Any
    ) -> ConversationsInfoResponse:
        require("conversations.info", channel=channel)
        params["channel"] = channel
        return await self._call(
            "conversations.info", ConversationsInfoResponse, params, token=token
        )

    async def conversations_history(
        self, *, channel: str, token: str | None = None, **params: Any
    ) -> ConversationsHistoryResponse:
        require("conversations.history", channel=channel)
        params["channel"] = channel
        return await self._call(
            "conversations.history", ConversationsHistoryResponse, params, token=token
        )

    async def conversations_replies(
        self, *, channel: str, ts: str, token: str | None = None, **params: Any
    ) -> ConversationsRepliesResponse:
        require("conversations.replies", channel=channel, ts=ts)
        params.update(channel=channel, ts=ts)
        return await self._call(
            "conversations.replies", ConversationsRepliesResponse, params, token=token
        )

    async def conversations_create(
        self,
        *,
        name: str,
        is_private: bool | None = None,
        token: str | None = None,
        **params: Any,
    ) -> ConversationsCreateResponse:
        require("conversations.create", name=name)
        params.update(name=name, is_private=is_private)
        return await self._call(
            "conversations.create", ConversationsCreateResponse, params, token=token
        )

    async def conversations_join(
        self, *, channel: str, token: str | None = None, **params: Any
    ) -> ConversationsJoinResponse:
        require("conversations.join", channel=channel)
        params["channel"] = channel
        return await self._call(
            "conversations.join", ConversationsJoinResponse, params, token=token
        )

    async def conversations_invite(
        self,
        *,
        channel: str,
        users: list[str] | str,
        token: str | None = None,
        **params: Any,
    ) -> ConversationsInviteResponse:
        require("conversations.invite", channel=channel, users=users)
        params.update(channel=channel, users=_join_ids(users))
        return await self._call(
            "conversations.invite", ConversationsInviteResponse, params, token=token
        )

    async def conversations_kick(
        self, *, channel: str, user: str, token: str | None = None, **params: Any
    ) -> ConversationsKickResponse:
        require("conversations.kick", channel=channel, user=user)
        params.update(channel=channel, user=user)
        return await self._call(
            "conversations.kick", ConversationsKickResponse, params, token=token
        )

    async def conversations_leave(
        self, *, channel: str, token: str | None = None, **params: Any
    ) -> ConversationsLeaveResponse:
        require("conversations.leave", channel=channel)
        params["channel"] = channel
        return await self._call(
            "conversations.leave", ConversationsLeaveResponse, params, token=token
        )

    async def conversations_archive(
        self, *, channel: str, token: str | None = None, **params: Any
    ) -> ConversationsArchiveResponse:
        require("conversations.archive", channel=channel)
        params["channel"] = channel
        return await self._call(
            "conversations.archive", ConversationsArchiveResponse, params, token=token
        )

    async def conversations_unarchive(
        self, *, channel: str, token: str | None = None, **params: Any
    ) -> ConversationsUnarchiveResponse:
        require("conversations.unarchive", channel=channel)
        params["channel"] = channel
        return await self._call(
            "conversations.unarchive", ConversationsUnarchiveResponse, params, token=token
        )

    async def conversations_rename(
        self, *, channel: str, name: str, token: str | None = None, **params: Any
    ) -> ConversationsRenameResponse:
        require("conversations.rename", channel=channel, name=name)
        params.update(channel=channel, name=name)
        return await self._call(
            "conversations.rename", ConversationsRenameResponse, params, token=token
        )

    async def conversations_set_topic(
        self, *, channel: str, topic: str, token: str | None = None, **params: Any
    ) -> ConversationsSetTopicResponse:
        require("conversations.setTopic", channel=channel)
        params.update(channel=channel, topic=topic)
        return await self._call(
            "conversations.setTopic", ConversationsSetTopicResponse, params, token=token
        )

    async def conversations_set_purpose(
        self, *, channel: str, purpose: str, token: str | None = None, **params: Any
    ) -> ConversationsSetPurposeResponse:
        require("conversations.setPurpose", channel=channel)
        params.update(channel=channel, purpose=purpose)
        return await self._call(
            "conversations.setPurpose", ConversationsSetPurposeResponse, params, token=token
        )

    async def conversations_members(
        self, *, channel: str, token: str | None = None, **params: Any
    ) -> ConversationsMembersResponse:
        require("conversations.members", channel=channel)
        params["channel"] = channel
        return await self._call(
            "conversations.members", ConversationsMembersResponse, params, token=token
        )

    async def conversations_open(
        self,
        *,
        channel: str | None = None,
        users: list[str] | str | None = None,
        return_im: bool | None = None,
        token: str | None = None,
        **params: Any,
    ) -> ConversationsOpenResponse:
        """Abre DM/MPIM por `users` ou retoma uma conversa por `channel`."""
        require_one_of("conversations.open", channel=channel, users=users)
        params.update(channel=channel, users=_join_ids(users), return_im=return_im)
        return await self._call(
            "conversations.open", ConversationsOpenResponse, params, token=token
        )

    async def conversations_close(
        self, *, channel: str, token: str | None = None, **params: Any
    ) -> ConversationsCloseResponse:
        require("conversations.close", channel=channel)
        params["channel"] = channel
        return await self._call(
            "conversations.close", ConversationsCloseResponse, params, token=token
        )
