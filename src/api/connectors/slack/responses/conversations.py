"""Respostas de conversations.*."""

from __future__ import annotations

from pydantic import Field

from api.connectors.slack.models import Conversation, Message

from .base import SlackApiResponse


class ConversationResponse(SlackApiResponse):
    """Respostas que trazem um único `channel`."""

    channel: Conversation | None = None


class ConversationsListResponse(SlackApiResponse):
    channels: list[Conversation] = Field(default_factory=list)


class ConversationsInfoResponse(ConversationResponse):
    pass


class ConversationsCreateResponse(ConversationResponse):
    pass


class ConversationsJoinResponse(ConversationResponse):
    pass


class ConversationsInviteResponse(ConversationResponse):
    pass


class ConversationsRenameResponse(ConversationResponse):
    pass


class ConversationsOpenResponse(ConversationResponse):
    no_op: bool | None = None
    already_open: bool | None = None


class ConversationsHistoryResponse(SlackApiResponse):
    messages: list[Message] = Field(default_factory=list)
    has_more: bool = False
    pin_count: int | None = None
    latest: str | None = None


class ConversationsRepliesResponse(SlackApiResponse):
    messages: list[Message] = Field(default_factory=list)
    has_more: bool = False


class ConversationsMembersResponse(SlackApiResponse):
    members: list[str] = Field(default_factory=list)


class ConversationsKickResponse(SlackApiResponse):
    pass


class ConversationsLeaveResponse(SlackApiResponse):
    not_in_channel: bool | None = None


class ConversationsArchiveResponse(SlackApiResponse):
    pass


class ConversationsUnarchiveResponse(SlackApiResponse):
    pass


class ConversationsSetTopicResponse(ConversationResponse):
    pass


class ConversationsSetPurposeResponse(ConversationResponse):
    pass


class ConversationsCloseResponse(SlackApiResponse):
    no_op: bool | None = None
    already_closed: bool | None = None
