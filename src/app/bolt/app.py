"""App: roteia requisições do Slack para os handlers registrados.

Uso:
    app = App(AppConfig(signing_secret="...", single_team_bot_token="xoxb-..."))

    @app.command("/hello")
    async def hello(req, ctx):
        return ctx.ack(f"Olá, <@{ctx.request_user_id}>!")

    app.global_shortcut(re.compile("report-.+"), open_report_modal)

    response = await app.run(build_request(raw_body, headers))
"""

from __future__ import annotations

import inspect
import logging
from collections import defaultdict
from typing import TYPE_CHECKING, Any

from api.connectors.slack.http_client import SlackHttpClient, create_slack_http_client
from api.connectors.slack.methods import MethodsClient
from api.connectors.slack.payloads import EventsApiPayload, UrlVerificationPayload
from app.bolt.config import AppConfig
from app.bolt.context import Context
from app.bolt.matchers import IdMatcher, Matchable, TextMatcher
from app.bolt.middleware import (
    IgnoringSelfEvents,
    Middleware,
    RequestVerification,
    SingleTeamAuthorization,
    SslCheck,
)
from app.bolt.request import RequestType
from app.bolt.response import Response
from utils.errors import AppConfigError

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from app.bolt.request import Request

    Handler = Callable[[Request, Context], Awaitable[Response | None] | Response | None]
    ErrorHandler = Callable[
        [Exception, Request, Context], Awaitable[Response | None] | Response | None
    ]

logger = logging.getLogger(__name__)

MESSAGE_EVENT = "message"


async def _maybe_await(result: Any) -> Any:
    if inspect.isawaitable(result):
        return await result
    return result


class App:
    def __init__(
        self,
        config: AppConfig | None = None,
        *,
        client: MethodsClient | None = None,
        http_client: SlackHttpClient | None = None,
    ) -> None:
        self.config = config or AppConfig()
        errors = self.config.validate()
        if errors:
            raise AppConfigError("; ".join(errors))

        self._http = http_client or create_slack_http_client()
        self.client = client or MethodsClient(
            token=self.config.single_team_bot_token, http_client=self._http
        )

        self._routes: dict[RequestType, list[tuple[IdMatcher, Handler]]] = defaultdict(list)
        self._event_handlers: dict[str, Handler] = {}
        self._message_handlers: list[tuple[TextMatcher, Handler]] = []
        self._middleware: list[Middleware] = []
        self._error_handler: ErrorHandler | None = None
        self._builtin_middleware = self._build_builtin_middleware()

    def _build_builtin_middleware(self) -> list[Middleware]:
        config = self.config
        middleware: list[Middleware] = []
        if config.ssl_check_enabled:
            middleware.append(SslCheck())
        if config.request_verification_enabled:
            middleware.append(
                RequestVerification(
                    config.signing_secret or "", config.signature_tolerance_seconds
                )
            )
        if config.single_team_bot_token:
            middleware.append(
                SingleTeamAuthorization(self.client, config.single_team_bot_token)
            )
        if config.ignoring_self_events_enabled:
            middleware.append(IgnoringSelfEvents())
        return middleware

    # ------------------------------------------------------------------
    # Registro
    # ------------------------------------------------------------------

    def use(self, middleware: Middleware) -> App:
        """Adiciona middleware após os embutidos, na ordem de registro."""
        self._middleware.append(middleware)
        return self

    def error(self, handler: ErrorHandler) -> App:
        self._error_handler = handler
        return self

    def _register(
        self, request_type: RequestType, key: Matchable, handler: Handler | None
    ) -> Any:
        matcher = IdMatcher.of(key)

        def decorator(fn: Handler) -> Handler:
            self._routes[request_type].append((matcher, fn))
            return fn

        if handler is None:
            return decorator
        decorator(handler)
        return self

    def event(self, event_type: str, handler: Handler | None = None) -> Any:
        """Registra handler para `type` ou `type:subtype` (ex: message:bot_message)."""

        def decorator(fn: Handler) -> Handler:
            if event_type in self._event_handlers:
                logger.warning("event_handler_replaced", extra={"event_key": event_type})
            self._event_handlers[event_type] = fn
            return fn

        if handler is None:
            return decorator
        decorator(handler)
        return self

    def message(self, pattern: Matchable, handler: Handler | None = None) -> Any:
        """Registra handler para mensagens cujo texto contenha `pattern` (regex)."""
        matcher = TextMatcher.of(pattern)

        def decorator(fn: Handler) -> Handler:
            self._message_handlers.append((matcher, fn))
            return fn

        if handler is None:
            return decorator
        decorator(handler)
        return self

    def command(self, name: Matchable, handler: Handler | None = None) -> Any:
        return self._register(RequestType.COMMAND, name, handler)

    def global_shortcut(self, callback_id: Matchable, handler: Handler | None = None) -> Any:
        return self._register(RequestType.GLOBAL_SHORTCUT, callback_id, handler)

    def message_shortcut(self, callback_id: Matchable, handler: Handler | None = None) -> Any:
        return self._register(RequestType.MESSAGE_SHORTCUT, callback_id, handler)

    def block_action(self, action_id: Matchable, handler: Handler | None = None) -> Any:
        return self._register(RequestType.BLOCK_ACTION, action_id, handler)

    def block_suggestion(self, action_id: Matchable, handler: Handler | None = None) -> Any:
        return self._register(RequestType.BLOCK_SUGGESTION, action_id, handler)

    def view_submission(self, callback_id: Matchable, handler: Handler | None = None) -> Any:
        return self._register(RequestType.VIEW_SUBMISSION, callback_id, handler)

    def view_closed(self, callback_id: Matchable, handler: Handler | None = None) -> Any:
        return self._register(RequestType.VIEW_CLOSED, callback_id, handler)

    def dialog_submission(self, callback_id: Matchable, handler: Handler | None = None) -> Any:
        return self._register(RequestType.DIALOG_SUBMISSION, callback_id, handler)

    def dialog_suggestion(self, callback_id: Matchable, handler: Handler | None = None) -> Any:
        return self._register(RequestType.DIALOG_SUGGESTION, callback_id, handler)

    def dialog_cancellation(
        self, callback_id: Matchable, handler: Handler | None = None
    ) -> Any:
        return self._register(RequestType.DIALOG_CANCELLATION, callback_id, handler)

    def attachment_action(self, callback_id: Matchable, handler: Handler | None = None) -> Any:
        return self._register(RequestType.ATTACHMENT_ACTION, callback_id, handler)

    # ------------------------------------------------------------------
    # Execução
    # ------------------------------------------------------------------

    def _new_context(self, request: Request) -> Context:
        return Context(
            request,
            client=self.client,
            http_client=self._http,
            bot_token=self.config.single_team_bot_token,
        )

    async def run(self, request: Request | None) -> Response:
        """Executa middlewares e o handler correspondente à requisição."""
        if request is None:
            return Response.error(400, "invalid request")

        context = self._new_context(request)
        chain = [*self._builtin_middleware, *self._middleware]

        async def call(index: int) -> Response:
            if index < len(chain):
                return await chain[index].apply(request, context, lambda: call(index + 1))
            return await self._dispatch(request, context)

        try:
            response = await call(0)
        except Exception as exc:
            response = await self._handle_error(exc, request, context)

        logger.info(
            "request_dispatched",
            extra={
                "request_type": request.request_type.value,
                "routing_key": request.routing_key,
                "status_code": response.status_code,
                "retry_num": request.retry_num,
            },
        )
        return response

    async def _dispatch(self, request: Request, context: Context) -> Response:
        request_type = request.request_type
        payload = request.payload

        if request_type == RequestType.URL_VERIFICATION and self.config.url_verification_enabled:
            if not isinstance(payload, UrlVerificationPayload):
                return Response.error(400, "invalid request")
            return Response.json(200, {"challenge": payload.challenge})

        if request_type == RequestType.SSL_CHECK:
            return Response.ok()

        if request_type == RequestType.APP_RATE_LIMITED:
            logger.warning(
                "app_rate_limited",
                extra={"minute_rate_limited": getattr(payload, "minute_rate_limited", None)},
            )
            return Response.ok()

        handler = self._find_handler(request)
        if handler is None:
            logger.warning(
                "unhandled_request",
                extra={
                    "request_type": request_type.value,
                    "routing_key": request.routing_key,
                },
            )
            return Response.error(404, "unhandled request")

        result = await _maybe_await(handler(request, context))
        if result is None:
            return context.ack()
        if not isinstance(result, Response):
            raise TypeError(
                f"handler deve retornar Response ou None, recebeu {type(result).__name__}"
            )
        return result

    def _find_handler(self, request: Request) -> Handler | None:
        if request.request_type == RequestType.EVENT:
            return self._find_event_handler(request)

        key = request.routing_key
        for matcher, handler in self._routes.get(request.request_type, []):
            if matcher.matches(key):
                return handler
        return None

    def _find_event_handler(self, request: Request) -> Handler | None:
        payload = request.payload
        if not isinstance(payload, EventsApiPayload):
            return None
        event = payload.event

        if event.key == MESSAGE_EVENT and self._message_handlers:
            for matcher, handler in self._message_handlers:
                if matcher.matches(event.text):
                    return handler
            fallback = self._event_handlers.get(MESSAGE_EVENT)
            # Mensagem sem listener correspondente é apenas confirmada
            return fallback or _ack_only

        return self._event_handlers.get(event.key)

    async def _handle_error(
        self, exc: Exception, request: Request, context: Context
    ) -> Response:
        if self._error_handler is not None:
            try:
                result = await _maybe_await(self._error_handler(exc, request, context))
            except Exception:
                logger.exception(
                    "error_handler_failed",
                    extra={"request_type": request.request_type.value},
                )
                return Response.error(500, "internal error")
            if isinstance(result, Response):
                return result

        logger.exception(
            "request_handler_failed",
            extra={
                "request_type": request.request_type.value,
                "routing_key": request.routing_key,
            },
            exc_info=exc,
        )
        return Response.error(500, "internal error")


def _ack_only(request: Request, context: Context) -> Response:
    return context.ack()
