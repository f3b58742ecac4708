"""Dispatcher de baixo nível da Events API.

Entrega cada `event_callback` a todos os handlers registrados para a chave
do evento, na ordem de registro. Não faz verificação de assinatura: use
parse_webhook_request antes.
"""

from __future__ import annotations

import inspect
import json
import logging
from collections import defaultdict
from typing import TYPE_CHECKING, Any

from api.connectors.slack.payloads import EVENT_CALLBACK, EventsApiPayload
from api.connectors.slack.webhook import InvalidBodyError

if TYPE_CHECKING:
    from .handlers import EventHandler

logger = logging.getLogger(__name__)


class EventsDispatcher:
    def __init__(self) -> None:
        self._handlers: dict[str, list[EventHandler]] = defaultdict(list)

    def register(self, handler: EventHandler) -> None:
        self._handlers[handler.get_event_type()].append(handler)

    def deregister(self, handler: EventHandler) -> None:
        handlers = self._handlers.get(handler.get_event_type(), [])
        if handler in handlers:
            handlers.remove(handler)

    def handlers_for(self, event_key: str) -> list[EventHandler]:
        return list(self._handlers.get(event_key, []))

    async def dispatch(self, payload: str | bytes | dict[str, Any]) -> int:
        """Entrega o payload aos handlers da sua chave.

        Returns:
            Quantidade de handlers executados.

        Raises:
            InvalidBodyError: Payload textual que não é JSON.
            Exception: Erros dos handlers são logados e propagados.
        """
        data: Any = payload
        if isinstance(payload, (str, bytes)):
            try:
                data = json.loads(payload)
            except (json.JSONDecodeError, UnicodeDecodeError) as exc:
                raise InvalidBodyError("invalid_json") from exc
        if not isinstance(data, dict):
            logger.debug("events_dispatch_ignored", extra={"payload_type": type(data).__name__})
            return 0
        if data.get("type") != EVENT_CALLBACK:
            logger.debug("events_dispatch_ignored", extra={"payload_type": data.get("type")})
            return 0

        envelope = EventsApiPayload.model_validate(data)
        handlers = self.handlers_for(envelope.event_key)
        if not handlers:
            logger.debug(
                "events_dispatch_no_handler",
                extra={"event_key": envelope.event_key, "event_id": envelope.event_id},
            )
            return 0

        for handler in handlers:
            try:
                result = handler.handle(envelope)
                if inspect.isawaitable(result):
                    await result
            except Exception:
                logger.exception(
                    "events_handler_failed",
                    extra={
                        "event_key": envelope.event_key,
                        "event_id": envelope.event_id,
                        "handler": type(handler).__name__,
                    },
                )
                raise
        return len(handlers)
