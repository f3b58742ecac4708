"""Endpoint único do Slack (Events API, slash commands, interatividade).

Endpoint:
- POST <events_path> (padrão /slack/events)

Fluxo:
1. Lê o corpo bruto (necessário para a assinatura)
2. Define correlation_id (x-correlation-id ou event_id/trigger_id)
3. Converte em Request e delega ao App
4. Converte a Response do App em resposta HTTP

O Slack espera resposta em até 3 segundos; trabalho demorado deve
ser agendado pelo handler após o ack.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fastapi import APIRouter, Request
from fastapi import Response as HttpResponse

from api.connectors.slack.event_id import compute_inbound_event_id
from app.bolt import build_request
from app.observability import correlation_scope
from config.settings.slack import DEFAULT_EVENTS_PATH

if TYPE_CHECKING:
    from app.bolt import App, Response

logger = logging.getLogger(__name__)


def _to_http_response(response: Response) -> HttpResponse:
    return HttpResponse(
        content=response.body,
        status_code=response.status_code,
        media_type=response.content_type,
        headers=response.headers or None,
    )


def create_slack_router(bolt_app: App, path: str = DEFAULT_EVENTS_PATH) -> APIRouter:
    """Cria router com o endpoint do Slack ligado ao App informado."""
    router = APIRouter()

    @router.post(path, response_model=None)
    async def receive_slack_request(request: Request) -> HttpResponse:
        raw_body = await request.body()
        slack_request = build_request(
            raw_body,
            headers=dict(request.headers),
            query=dict(request.query_params),
        )
        correlation_id = request.headers.get("x-correlation-id")
        if not correlation_id and slack_request is not None:
            correlation_id = compute_inbound_event_id(slack_request.body, raw_body)

        with correlation_scope(correlation_id):
            logger.info(
                "slack_request_received",
                extra={
                    "request_type": (
                        slack_request.request_type.value if slack_request else None
                    ),
                    "payload_size": len(raw_body),
                    "retry_num": slack_request.retry_num if slack_request else None,
                },
            )
            response = await bolt_app.run(slack_request)

        return _to_http_response(response)

    return router
