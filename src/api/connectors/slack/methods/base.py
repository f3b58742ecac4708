"""Base das bindings da Web API: chamada tipada e paginação por cursor."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, TypeVar

from api.connectors.slack.http_client import SlackHttpClient, create_slack_http_client
from api.connectors.slack.responses import SlackApiResponse

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

    from config.settings import SlackSettings

logger = logging.getLogger(__name__)

ResponseT = TypeVar("ResponseT", bound=SlackApiResponse)

DEFAULT_PAGE_LIMIT = 200


def _is_empty(value: Any) -> bool:
    if isinstance(value, (str, bytes, list, tuple, dict)):
        return not value
    return value is None


def require(method: str, /, **values: Any) -> None:
    """Valida argumentos obrigatórios antes de qualquer IO."""
    missing = [name for name, value in values.items() if _is_empty(value)]
    if missing:
        raise ValueError(f"{method}: argumentos obrigatórios ausentes: {', '.join(missing)}")


def require_one_of(method: str, **values: Any) -> None:
    if all(_is_empty(value) for value in values.values()):
        raise ValueError(f"{method}: informe ao menos um de: {', '.join(values)}")


class BaseMethods:
    """Estado compartilhado pelas famílias de métodos."""

    def __init__(
        self,
        token: str | None = None,
        http_client: SlackHttpClient | None = None,
        settings: SlackSettings | None = None,
    ) -> None:
        self.token = token
        self._http = http_client or create_slack_http_client(settings)

    def with_token(self, token: str | None) -> BaseMethods:
        """Nova instância compartilhando o cliente HTTP, com outro token."""
        return type(self)(token=token, http_client=self._http)

    async def _call(
        self,
        method: str,
        response_model: type[ResponseT],
        params: dict[str, Any],
        token: str | None = None,
        files: dict[str, Any] | None = None,
    ) -> ResponseT:
        data = await self._http.call_method(
            method,
            params,
            token=token or self.token,
            files=files,
        )
        return response_model.model_validate(data)

    async def api_call(
        self,
        method: str,
        response_model: type[ResponseT] = SlackApiResponse,  # type: ignore[assignment]
        *,
        token: str | None = None,
        **params: Any,
    ) -> ResponseT:
        """Chama qualquer método pelo nome (útil para métodos sem binding)."""
        require("api_call", method=method)
        return await self._call(method, response_model, params, token=token)

    async def paginate(
        self,
        method: str,
        response_model: type[ResponseT],
        items_key: str,
        *,
        token: str | None = None,
        **params: Any,
    ) -> AsyncIterator[Any]:
        """Itera itens de todas as páginas seguindo response_metadata.next_cursor.

        Raises:
            SlackApiCallError: Se alguma página voltar com `ok: false`.
        """
        params.setdefault("limit", DEFAULT_PAGE_LIMIT)
        cursor: str | None = params.pop("cursor", None)
        pages = 0
        while True:
            response = await self._call(
                method, response_model, {**params, "cursor": cursor}, token=token
            )
            response.raise_for_error(method)
            pages += 1
            for item in getattr(response, items_key):
                yield item
            cursor = response.next_cursor
            if not cursor:
                break
        logger.debug("slack_api_paginated", extra={"method": method, "pages": pages})
