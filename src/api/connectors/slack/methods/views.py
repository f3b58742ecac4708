"""views.*"""

from __future__ import annotations

from typing import Any

from api.connectors.slack.responses import (
    ViewsOpenResponse,
    ViewsPublishResponse,
    ViewsPushResponse,
    ViewsUpdateResponse,
)

from .base import BaseMethods, require, require_one_of


class ViewsMethods(BaseMethods):
    async def views_open(
        self,
        *,
        trigger_id: str,
        view: dict[str, Any],
        token: str | None = None,
        **params: Any,
    ) -> ViewsOpenResponse:
        """Abre modal. trigger_id expira em 3 segundos."""
        require("views.open", trigger_id=trigger_id, view=view)
        params.update(trigger_id=trigger_id, view=view)
        return await self._call("views.open", ViewsOpenResponse, params, token=token)

    async def views_push(
        self,
        *,
        trigger_id: str,
        view: dict[str, Any],
        token: str | None = None,
        **params: Any,
    ) -> ViewsPushResponse:
        require("views.push", trigger_id=trigger_id, view=view)
        params.update(trigger_id=trigger_id, view=view)
        return await self._call("views.push", ViewsPushResponse, params, token=token)

    async def views_update(
        self,
        *,
        view: dict[str, Any],
        view_id: str | None = None,
        external_id: str | None = None,
        hash: str | None = None,
        token: str | None = None,
        **params: Any,
    ) -> ViewsUpdateResponse:
        require("views.update", view=view)
        require_one_of("views.update", view_id=view_id, external_id=external_id)
        params.update(view=view, view_id=view_id, external_id=external_id, hash=hash)
        return await self._call("views.update", ViewsUpdateResponse, params, token=token)

    async def views_publish(
        self,
        *,
        user_id: str,
        view: dict[str, Any],
        hash: str | None = None,
        token: str | None = None,
        **params: Any,
    ) -> ViewsPublishResponse:
        """Publica a aba Home do usuário."""
        require("views.publish", user_id=user_id, view=view)
        params.update(user_id=user_id, view=view, hash=hash)
        return await self._call("views.publish", ViewsPublishResponse, params, token=token)
