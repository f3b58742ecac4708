"""Middlewares do App.

Um middleware recebe (request, context, next_) e devolve a Response;
para interromper a cadeia basta retornar sem chamar `next_`.
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Protocol

from api.connectors.slack.payloads import EventsApiPayload
from api.connectors.slack.signature import verify_slack_signature
from app.bolt.request import RequestType
from app.bolt.response import Response
from utils.errors import SlackApiRequestError

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from api.connectors.slack.methods import MethodsClient
    from app.bolt.context import Context
    from app.bolt.request import Request

    NextCall = Callable[[], Awaitable[Response]]

logger = logging.getLogger(__name__)

# Requisições que não carregam workspace nem exigem token
_NO_AUTH_TYPES = frozenset({RequestType.SSL_CHECK, RequestType.URL_VERIFICATION})

# Eventos do próprio bot que ainda interessam ao app
_SELF_EVENTS_KEPT = frozenset({"member_joined_channel", "member_left_channel"})


class Middleware(Protocol):
    async def apply(
        self, request: Request, context: Context, next_: NextCall
    ) -> Response: ...


class SslCheck:
    """Responde 200 para `ssl_check=1` sem executar handlers."""

    async def apply(self, request: Request, context: Context, next_: NextCall) -> Response:
        if request.request_type == RequestType.SSL_CHECK:
            return Response.ok()
        return await next_()


class RequestVerification:
    """Rejeita com 401 requisições sem X-Slack-Signature válido."""

    def __init__(self, signing_secret: str, tolerance_seconds: int) -> None:
        self._signing_secret = signing_secret
        self._tolerance_seconds = tolerance_seconds

    async def apply(self, request: Request, context: Context, next_: NextCall) -> Response:
        result = verify_slack_signature(
            request.raw_body,
            request.headers,
            self._signing_secret,
            tolerance_seconds=self._tolerance_seconds,
        )
        if not result.valid:
            logger.warning(
                "request_signature_invalid",
                extra={"request_type": request.request_type.value, "error": result.error},
            )
            return Response.error(401, "invalid request")
        return await next_()


class SingleTeamAuthorization:
    """Resolve bot_user_id/bot_id via auth.test (uma vez) para o token do bot."""

    def __init__(self, client: MethodsClient, bot_token: str) -> None:
        self._client = client
        self._bot_token = bot_token
        self._lock = asyncio.Lock()
        self._bot_user_id: str | None = None
        self._bot_id: str | None = None
        self._authorized = False

    async def _authorize(self) -> bool:
        async with self._lock:
            if self._authorized:
                return True
            try:
                response = await self._client.auth_test(token=self._bot_token)
            except SlackApiRequestError as exc:
                logger.warning(
                    "auth_test_failed",
                    extra={"status_code": exc.status_code, "error_type": type(exc).__name__},
                )
                return False
            if not response.ok:
                logger.warning("auth_test_rejected", extra={"error": response.error})
                return False
            self._bot_user_id = response.user_id
            self._bot_id = response.bot_id
            self._authorized = True
            return True

    async def apply(self, request: Request, context: Context, next_: NextCall) -> Response:
        if request.request_type in _NO_AUTH_TYPES:
            return await next_()
        if not await self._authorize():
            return Response.error(401, "invalid token")
        context.bot_token = self._bot_token
        context.bot_user_id = self._bot_user_id
        context.bot_id = self._bot_id
        return await next_()


class IgnoringSelfEvents:
    """Descarta (com 200) eventos gerados pelo próprio bot, evitando loops."""

    async def apply(self, request: Request, context: Context, next_: NextCall) -> Response:
        payload = request.payload
        if isinstance(payload, EventsApiPayload) and _is_self_event(payload, context):
            logger.debug(
                "self_event_skipped",
                extra={"event_key": payload.event_key, "event_id": payload.event_id},
            )
            return Response.ok()
        return await next_()


def _is_self_event(payload: EventsApiPayload, context: Context) -> bool:
    event = payload.event
    if event.type in _SELF_EVENTS_KEPT:
        return False
    if context.bot_id and event.bot_id == context.bot_id:
        return True
    return bool(context.bot_user_id) and event.user_id == context.bot_user_id
