"""reactions.* e pins.*"""

from __future__ import annotations

from typing import Any

from api.connectors.slack.responses import (
    PinsAddResponse,
    PinsListResponse,
    PinsRemoveResponse,
    ReactionsAddResponse,
    ReactionsGetResponse,
    ReactionsListResponse,
    ReactionsRemoveResponse,
)

from .base import BaseMethods, require


class ReactionsMethods(BaseMethods):
    async def reactions_add(
        self,
        *,
        channel: str,
        timestamp: str,
        name: str,
        token: str | None = None,
        **params: Any,
    ) -> ReactionsAddResponse:
        require("reactions.add", channel=channel, timestamp=timestamp, name=name)
        params.update(channel=channel, timestamp=timestamp, name=name.strip(":"))
        return await self._call("reactions.add", ReactionsAddResponse, params, token=token)

    async def reactions_remove(
        self, *, name: str, token: str | None = None, **params: Any
    ) -> ReactionsRemoveResponse:
        require("reactions.remove", name=name)
        params["name"] = name.strip(":")
        return await self._call("reactions.remove", ReactionsRemoveResponse, params, token=token)

    async def reactions_get(
        self, *, token: str | None = None, **params: Any
    ) -> ReactionsGetResponse:
        return await self._call("reactions.get", ReactionsGetResponse, params, token=token)

    async def reactions_list(
        self, *, token: str | None = None, **params: Any
    ) -> ReactionsListResponse:
        return await self._call("reactions.list", ReactionsListResponse, params, token=token)


class PinsMethods(BaseMethods):
    async def pins_add(
        self, *, channel: str, timestamp: str, token: str | None = None, **params: Any
    ) -> PinsAddResponse:
        require("pins.add", channel=channel, timestamp=timestamp)
        params.update(channel=channel, timestamp=timestamp)
        return await self._call("pins.add", PinsAddResponse, params, token=token)

    async def pins_remove(
        self, *, channel: str, timestamp: str, token: str | None = None, **params: Any
    ) -> PinsRemoveResponse:
        require("pins.remove", channel=channel, timestamp=timestamp)
        params.update(channel=channel, timestamp=timestamp)
        return await self._call("pins.remove", PinsRemoveResponse, params, token=token)

    async def pins_list(
        self, *, channel: str, token: str | None = None, **params: Any
    ) -> PinsListResponse:
        require("pins.list", channel=channel)
        params["channel"] = channel
        return await self._call("pins.list", PinsListResponse, params, token=token)
