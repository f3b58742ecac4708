"""users.*"""

from __future__ import annotations

from typing import Any

from api.connectors.slack.responses import (
    UsersConversationsResponse,
    UsersGetPresenceResponse,
    UsersInfoResponse,
    UsersListResponse,
    UsersLookupByEmailResponse,
)

from .base import BaseMethods, require


class UsersMethods(BaseMethods):
    async def users_info(
        self,
        *,
        user: str,
        include_locale: bool | None = None,
        token: str | None = None,
        **params: Any,
    ) -> UsersInfoResponse:
        require("users.info", user=user)
        params.update(user=user, include_locale=include_locale)
        return await self._call("users.info", UsersInfoResponse, params, token=token)

    async def users_list(self, *, token: str | None = None, **params: Any) -> UsersListResponse:
        return await self._call("users.list", UsersListResponse, params, token=token)

    async def users_lookup_by_email(
        self, *, email: str, token: str | None = None, **params: Any
    ) -> UsersLookupByEmailResponse:
        require("users.lookupByEmail", email=email)
        params["email"] = email
        return await self._call(
            "users.lookupByEmail", UsersLookupByEmailResponse, params, token=token
        )

    async def users_conversations(
        self, *, token: str | None = None, **params: Any
    ) -> UsersConversationsResponse:
        types = params.get("types")
        if isinstance(types, list):
            params["types"] = ",".join(types)
        return await self._call(
            "users.conversations", UsersConversationsResponse, params, token=token
        )

    async def users_get_presence(
        self, *, user: str, token: str | None = None, **params: Any
    ) -> UsersGetPresenceResponse:
        require("users.getPresence", user=user)
        params["user"] = user
        return await self._call("users.getPresence", UsersGetPresenceResponse, params, token=token)
