"""Respostas de users.*."""

from __future__ import annotations

from pydantic import Field

from api.connectors.slack.models import Conversation, User

from .base import SlackApiResponse


class UsersInfoResponse(SlackApiResponse):
    user: User | None = None


class UsersListResponse(SlackApiResponse):
    members: list[User] = Field(default_factory=list)
    cache_ts: int | None = None


class UsersLookupByEmailResponse(SlackApiResponse):
    user: User | None = None


class UsersConversationsResponse(SlackApiResponse):
    channels: list[Conversation] = Field(default_factory=list)


class UsersGetPresenceResponse(SlackApiResponse):
    presence: str | None = None
    online: bool | None = None
    auto_away: bool | None = None
    manual_away: bool | None = None
    connection_count: int | None = None
    last_activity: int | None = None
