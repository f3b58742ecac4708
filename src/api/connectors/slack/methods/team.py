"""team.*, bots.*, emoji.* e usergroups.*"""

from __future__ import annotations

from typing import Any

from api.connectors.slack.responses import (
    BotsInfoResponse,
    EmojiListResponse,
    TeamInfoResponse,
    UsergroupsListResponse,
)

from .base import BaseMethods


class TeamMethods(BaseMethods):
    async def team_info(
        self, *, team: str | None = None, token: str | None = None, **params: Any
    ) -> TeamInfoResponse:
        params["team"] = team
        return await self._call("team.info", TeamInfoResponse, params, token=token)

    async def bots_info(
        self, *, bot: str | None = None, token: str | None = None, **params: Any
    ) -> BotsInfoResponse:
        params["bot"] = bot
        return await self._call("bots.info", BotsInfoResponse, params, token=token)

    async def emoji_list(self, *, token: str | None = None, **params: Any) -> EmojiListResponse:
        return await self._call("emoji.list", EmojiListResponse, params, token=token)

    async def usergroups_list(
        self,
        *,
        include_users: bool | None = None,
        include_disabled: bool | None = None,
        token: str | None = None,
        **params: Any,
    ) -> UsergroupsListResponse:
        params.update(include_users=include_users, include_disabled=include_disabled)
        return await self._call("usergroups.list", UsergroupsListResponse, params, token=token)
