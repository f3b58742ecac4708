"""Payloads da Events API (JSON enviado para a Request URL)."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

from .interactive import UnknownPayloadTypeError

EVENT_CALLBACK = "event_callback"
URL_VERIFICATION = "url_verification"
APP_RATE_LIMITED = "app_rate_limited"


class EventBody(BaseModel):
    """Campo `event` do envelope. Campos específicos do tipo ficam em extras."""

    model_config = ConfigDict(extra="allow")

    type: str
    subtype: str | None = None
    # `user` e `channel` chegam como objeto em alguns eventos (team_join, channel_created)
    user: str | dict[str, Any] | None = None
    bot_id: str | None = None
    channel: str | dict[str, Any] | None = None
    channel_type: str | None = None
    text: str | None = None
    ts: str | None = None
    thread_ts: str | None = None
    event_ts: str | None = None
    team: str | dict[str, Any] | None = None

    @property
    def key(self) -> str:
        """Chave de roteamento: `type` ou `type:subtype`."""
        return event_key(self.type, self.subtype)

    @property
    def user_id(self) -> str | None:
        if isinstance(self.user, dict):
            return self.user.get("id")
        return self.user

    @property
    def channel_id(self) -> str | None:
        """Canal do evento, inclusive quando vem como objeto ou em `item`."""
        if isinstance(self.channel, dict):
            return self.channel.get("id")
        if self.channel:
            return self.channel
        item = (self.model_extra or {}).get("item")
        if isinstance(item, dict) and isinstance(item.get("channel"), str):
            return item["channel"]
        return None


class Authorization(BaseModel):
    model_config = ConfigDict(extra="allow")

    enterprise_id: str | None = None
    team_id: str | None = None
    user_id: str | None = None
    is_bot: bool | None = None
    is_enterprise_install: bool | None = None


class EventsApiPayload(BaseModel):
    """Envelope `event_callback`."""

    model_config = ConfigDict(extra="ignore")

    type: Literal["event_callback"] = EVENT_CALLBACK
    token: str | None = None
    team_id: str | None = None
    enterprise_id: str | None = None
    api_app_id: str | None = None
    event: EventBody
    event_id: str | None = None
    event_time: int | None = None
    event_context: str | None = None
    authed_users: list[str] = Field(default_factory=list)
    authorizations: list[Authorization] = Field(default_factory=list)
    is_ext_shared_channel: bool | None = None

    @property
    def event_type(self) -> str:
        return self.event.type

    @property
    def event_key(self) -> str:
        return self.event.key


class UrlVerificationPayload(BaseModel):
    model_config = ConfigDict(extra="ignore")

    type: Literal["url_verification"] = URL_VERIFICATION
    token: str | None = None
    challenge: str


class AppRateLimitedPayload(BaseModel):
    model_config = ConfigDict(extra="ignore")

    type: Literal["app_rate_limited"] = APP_RATE_LIMITED
    token: str | None = None
    team_id: str | None = None
    minute_rate_limited: int | None = None
    api_app_id: str | None = None


def event_key(event_type: str, subtype: str | None = None) -> str:
    return f"{event_type}:{subtype}" if subtype else event_type


def parse_events_api_payload(
    data: dict[str, Any],
) -> EventsApiPayload | UrlVerificationPayload | AppRateLimitedPayload:
    """Converte o JSON da Events API no modelo do seu `type`.

    Raises:
        UnknownPayloadTypeError: Tipo não suportado
        pydantic.ValidationError: Estrutura inválida
    """
    payload_type = data.get("type")
    if payload_type == EVENT_CALLBACK:
        return EventsApiPayload.model_validate(data)
    if payload_type == URL_VERIFICATION:
        return UrlVerificationPayload.model_validate(data)
    if payload_type == APP_RATE_LIMITED:
        return AppRateLimitedPayload.model_validate(data)
    raise UnknownPayloadTypeError(str(payload_type))
