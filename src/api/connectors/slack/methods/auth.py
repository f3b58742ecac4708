"""api.* e auth.*."""

from __future__ import annotations

from typing import Any

from api.connectors.slack.responses import (
    ApiTestResponse,
    AuthRevokeResponse,
    AuthTestResponse,
)

from .base import BaseMethods


class AuthMethods(BaseMethods):
    async def api_test(self, **params: Any) -> ApiTestResponse:
        return await self._call("api.test", ApiTestResponse, params)

    async def auth_test(self, *, token: str | None = None, **params: Any) -> AuthTestResponse:
        return await self._call("auth.test", AuthTestResponse, params, token=token)

    async def auth_revoke(
        self, *, test: bool | None = None, token: str | None = None, **params: Any
    ) -> AuthRevokeResponse:
        params["test"] = test
        return await self._call("auth.revoke", AuthRevokeResponse, params, token=token)
