"""Contexto entregue aos handlers: ack, respond, say e cliente da Web API."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from api.payload_builders.slack import (
    build_message_payload,
    build_options_payload,
    build_view_response,
)
from app.bolt.response import Response

if TYPE_CHECKING:
    from api.connectors.slack.http_client import SlackHttpClient
    from api.connectors.slack.methods import MethodsClient
    from api.connectors.slack.responses import ChatPostMessageResponse
    from api.payload_builders.slack import ResponseAction, ResponseType
    from app.bolt.request import Request

logger = logging.getLogger(__name__)


class Context:
    """Estado por requisição.

    bot_user_id/bot_id são preenchidos pela autorização (auth.test).
    """

    def __init__(
        self,
        request: Request,
        client: MethodsClient,
        http_client: SlackHttpClient,
        bot_token: str | None = None,
    ) -> None:
        self.request = request
        self._client = client
        self._http = http_client
        self.bot_token = bot_token
        self.bot_user_id: str | None = None
        self.bot_id: str | None = None
        self.team_id = request.team_id
        self.enterprise_id = request.enterprise_id
        self.request_user_id = request.user_id
        self.channel_id = request.channel_id
        self.response_url = request.response_url
        self.trigger_id = request.trigger_id
        self.retry_num = request.retry_num
        self.retry_reason = request.retry_reason

    @property
    def client(self) -> MethodsClient:
        """MethodsClient autenticado com o token do bot."""
        if self._client.token != self.bot_token:
            self._client = self._client.with_token(self.bot_token)  # type: ignore[assignment]
        return self._client

    def ack(
        self,
        text: str | None = None,
        blocks: list[dict[str, Any]] | None = None,
        attachments: list[dict[str, Any]] | None = None,
        *,
        response_type: ResponseType | None = None,
        options: list[dict[str, Any]] | None = None,
        option_groups: list[dict[str, Any]] | None = None,
        response_action: ResponseAction | None = None,
        view: dict[str, Any] | None = None,
        errors: dict[str, str] | None = None,
        body: dict[str, Any] | None = None,
    ) -> Response:
        """Confirma a requisição (o Slack espera resposta em até 3 segundos).

        Sem argumentos devolve 200 com corpo vazio.
        """
        if body is not None:
            return Response.json(200, body)
        if response_action is not None:
            return Response.json(200, build_view_response(response_action, view, errors))
        if options is not None or option_groups is not None:
            return Response.json(200, build_options_payload(options, option_groups))
        if text or blocks or attachments:
            return Response.json(
                200,
                build_message_payload(
                    text, blocks, attachments, response_type=response_type
                ),
            )
        return Response.ok()

    async def respond(
        self,
        text: str | None = None,
        blocks: list[dict[str, Any]] | None = None,
        attachments: list[dict[str, Any]] | None = None,
        *,
        response_type: ResponseType | None = None,
        replace_original: bool | None = None,
        delete_original: bool | None = None,
        thread_ts: str | None = None,
    ) -> dict[str, Any] | str:
        """Envia mensagem para o response_url da requisição.

        Raises:
            ValueError: Requisição sem response_url
        """
        if not self.response_url:
            raise ValueError("requisição sem response_url")
        payload = build_message_payload(
            text,
            blocks,
            attachments,
            thread_ts=thread_ts,
            response_type=response_type,
            replace_original=replace_original,
            delete_original=delete_original,
        )
        return await self._http.send_to_response_url(self.response_url, payload)

    async def say(
        self,
        text: str | None = None,
        blocks: list[dict[str, Any]] | None = None,
        *,
        channel: str | None = None,
        thread_ts: str | None = None,
        **params: Any,
    ) -> ChatPostMessageResponse:
        """Publica no canal da requisição via chat.postMessage.

        Raises:
            ValueError: Sem canal na requisição e nenhum informado
        """
        target = channel or self.channel_id
        if not target:
            raise ValueError("requisição sem canal; informe channel")
        return await self.client.chat_post_message(
            channel=target, text=text, blocks=blocks, thread_ts=thread_ts, **params
        )
