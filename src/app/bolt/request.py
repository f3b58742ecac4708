"""Requisição recebida pelo App: tipo, corpo decodificado e payload tipado."""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ValidationError

from api.connectors.slack.payloads import (
    APP_RATE_LIMITED,
    EVENT_CALLBACK,
    URL_VERIFICATION,
    BlockActionsPayload,
    BlockSuggestionPayload,
    EventsApiPayload,
    SlashCommandPayload,
    UnknownPayloadTypeError,
    ViewSubmissionPayload,
    parse_events_api_payload,
    parse_interactive_payload,
)
from api.connectors.slack.webhook import InvalidBodyError, decode_body, is_ssl_check

logger = logging.getLogger(__name__)

RETRY_NUM_HEADER = "x-slack-retry-num"
RETRY_REASON_HEADER = "x-slack-retry-reason"


class RequestType(StrEnum):
    URL_VERIFICATION = "url_verification"
    SSL_CHECK = "ssl_check"
    EVENT = "event"
    APP_RATE_LIMITED = "app_rate_limited"
    COMMAND = "command"
    GLOBAL_SHORTCUT = "global_shortcut"
    MESSAGE_SHORTCUT = "message_shortcut"
    BLOCK_ACTION = "block_action"
    BLOCK_SUGGESTION = "block_suggestion"
    VIEW_SUBMISSION = "view_submission"
    VIEW_CLOSED = "view_closed"
    DIALOG_SUBMISSION = "dialog_submission"
    DIALOG_SUGGESTION = "dialog_suggestion"
    DIALOG_CANCELLATION = "dialog_cancellation"
    ATTACHMENT_ACTION = "attachment_action"


_INTERACTIVE_TYPES: dict[str, RequestType] = {
    "shortcut": RequestType.GLOBAL_SHORTCUT,
    "message_action": RequestType.MESSAGE_SHORTCUT,
    "block_actions": RequestType.BLOCK_ACTION,
    "block_suggestion": RequestType.BLOCK_SUGGESTION,
    "view_submission": RequestType.VIEW_SUBMISSION,
    "view_closed": RequestType.VIEW_CLOSED,
    "dialog_submission": RequestType.DIALOG_SUBMISSION,
    "dialog_suggestion": RequestType.DIALOG_SUGGESTION,
    "dialog_cancellation": RequestType.DIALOG_CANCELLATION,
    "interactive_message": RequestType.ATTACHMENT_ACTION,
}


class RequestHeaders(Mapping[str, str]):
    """Headers com lookup case-insensitive (chaves normalizadas em minúsculas)."""

    def __init__(self, headers: Mapping[str, str] | None = None) -> None:
        self._headers = {key.lower(): value for key, value in (headers or {}).items()}

    def __getitem__(self, key: str) -> str:
        return self._headers[key.lower()]

    def __iter__(self) -> Iterator[str]:
        return iter(self._headers)

    def __len__(self) -> int:
        return len(self._headers)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and key.lower() in self._headers


@dataclass
class Request:
    request_type: RequestType
    raw_body: bytes
    headers: RequestHeaders
    body: dict[str, Any]
    payload: BaseModel | None = None
    query: dict[str, str] = field(default_factory=dict)

    @property
    def routing_key(self) -> str | None:
        """Valor comparado com os ids registrados no App."""
        payload = self.payload
        if isinstance(payload, EventsApiPayload):
            return payload.event_key
        if isinstance(payload, SlashCommandPayload):
            return payload.command
        if isinstance(payload, (BlockActionsPayload, BlockSuggestionPayload)):
            return payload.action_id
        return getattr(payload, "callback_id", None)

    @property
    def retry_num(self) -> int | None:
        raw = self.headers.get(RETRY_NUM_HEADER)
        return int(raw) if raw and raw.isdigit() else None

    @property
    def retry_reason(self) -> str | None:
        return self.headers.get(RETRY_REASON_HEADER)

    @property
    def team_id(self) -> str | None:
        payload = self.payload
        if isinstance(payload, (EventsApiPayload, SlashCommandPayload)):
            return payload.team_id
        team = getattr(payload, "team", None)
        if team is not None:
            return team.id
        return self.body.get("team_id")

    @property
    def enterprise_id(self) -> str | None:
        payload = self.payload
        if isinstance(payload, (EventsApiPayload, SlashCommandPayload)):
            return payload.enterprise_id
        enterprise = getattr(payload, "enterprise", None)
        if enterprise is not None:
            return enterprise.id
        team = getattr(payload, "team", None)
        return getattr(team, "enterprise_id", None)

    @property
    def user_id(self) -> str | None:
        payload = self.payload
        if isinstance(payload, EventsApiPayload):
            return payload.event.user_id
        if isinstance(payload, SlashCommandPayload):
            return payload.user_id
        user = getattr(payload, "user", None)
        return getattr(user, "id", None)

    @property
    def channel_id(self) -> str | None:
        payload = self.payload
        if isinstance(payload, EventsApiPayload):
            return payload.event.channel_id
        if isinstance(payload, SlashCommandPayload):
            return payload.channel_id
        channel = getattr(payload, "channel", None)
        if channel is not None:
            return channel.id
        container = getattr(payload, "container", None) or {}
        return container.get("channel_id")

    @property
    def response_url(self) -> str | None:
        payload = self.payload
        if isinstance(payload, ViewSubmissionPayload):
            # Só existe quando o modal tem blocos com response_url_enabled
            if payload.response_urls:
                return payload.response_urls[0].get("response_url")
            return None
        return getattr(payload, "response_url", None)

    @property
    def trigger_id(self) -> str | None:
        return getattr(self.payload, "trigger_id", None)


def _detect_type(body: dict[str, Any]) -> RequestType | None:
    if is_ssl_check(body):
        return RequestType.SSL_CHECK
    if "command" in body:
        return RequestType.COMMAND

    payload_type = body.get("type")
    if payload_type == URL_VERIFICATION:
        return RequestType.URL_VERIFICATION
    if payload_type == EVENT_CALLBACK:
        return RequestType.EVENT
    if payload_type == APP_RATE_LIMITED:
        return RequestType.APP_RATE_LIMITED
    return _INTERACTIVE_TYPES.get(str(payload_type))


def _parse_payload(request_type: RequestType, body: dict[str, Any]) -> BaseModel | None:
    if request_type == RequestType.SSL_CHECK:
        return None
    if request_type == RequestType.COMMAND:
        return SlashCommandPayload.model_validate(body)
    if request_type in (
        RequestType.URL_VERIFICATION,
        RequestType.EVENT,
        RequestType.APP_RATE_LIMITED,
    ):
        return parse_events_api_payload(body)
    return parse_interactive_payload(body)


def build_request(
    raw_body: bytes | str,
    headers: Mapping[str, str] | None = None,
    query: Mapping[str, str] | None = None,
) -> Request | None:
    """Identifica e decodifica uma requisição do Slack.

    A assinatura não é verificada aqui (middleware RequestVerification).

    Returns:
        Request, ou None se o corpo não for reconhecido.
    """
    request_headers = RequestHeaders(headers)
    raw = raw_body.encode("utf-8") if isinstance(raw_body, str) else raw_body

    try:
        body = decode_body(raw, request_headers.get("content-type", "").lower())
    except InvalidBodyError as exc:
        logger.warning("request_body_invalid", extra={"error": str(exc)})
        return None

    request_type = _detect_type(body)
    if request_type is None:
        logger.warning("request_type_unknown", extra={"payload_type": body.get("type")})
        return None

    try:
        payload = _parse_payload(request_type, body)
    except (ValidationError, UnknownPayloadTypeError) as exc:
        logger.warning(
            "request_payload_invalid",
            extra={"request_type": request_type.value, "error_type": type(exc).__name__},
        )
        return None

    return Request(
        request_type=request_type,
        raw_body=raw,
        headers=request_headers,
        body=body,
        payload=payload,
        query=dict(query or {}),
    )
