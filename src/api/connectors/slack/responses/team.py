"""Respostas de team.*, bots.*, emoji.* e usergroups.*."""

from __future__ import annotations

from pydantic import Field

from api.connectors.slack.models import Bot, Team, Usergroup

from .base import SlackApiResponse


class TeamInfoResponse(SlackApiResponse):
    team: Team | None = None


class BotsInfoResponse(SlackApiResponse):
    bot: Bot | None = None


class EmojiListResponse(SlackApiResponse):
    emoji: dict[str, str] = Field(default_factory=dict)
    cache_ts: str | None = None


class UsergroupsListResponse(SlackApiResponse):
    usergroups: list[Usergroup] = Field(default_factory=list)
