"""Cliente HTTP especializado para a Web API do Slack.

Estende HttpClient genérico com comportamentos específicos:
- Encoding de parâmetros em form-urlencoded (blocks/attachments em JSON)
- Authorization: Bearer <token> (o token nunca vai para logs)
- Respostas `ok: false` logadas e devolvidas ao chamador
- Envio de mensagens para response_url / incoming webhooks
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from api.connectors.slack.http_base import HttpClient, HttpClientConfig, HttpError
from api.connectors.slack.slack_errors import parse_slack_error
from api.connectors.slack.slack_logging import log_api_error, log_api_warning, log_success
from config.settings.slack import SLACK_API_URL
from utils.errors import SlackApiRequestError

if TYPE_CHECKING:
    import httpx

    from config.settings import SlackSettings

logger: logging.Logger = logging.getLogger(__name__)


def encode_params(params: dict[str, Any]) -> dict[str, str]:
    """Converte parâmetros Python para campos de formulário da Web API.

    None é descartado, bool vira "true"/"false" e dict/list vira JSON.
    """
    encoded: dict[str, str] = {}
    for key, value in params.items():
        if value is None:
            continue
        if isinstance(value, bool):
            encoded[key] = "true" if value else "false"
        elif isinstance(value, (dict, list, tuple)):
            encoded[key] = json.dumps(value, separators=(",", ":"))
        else:
            encoded[key] = str(value)
    return encoded


class SlackHttpClient(HttpClient):
    """Cliente HTTP para métodos da Web API (https://slack.com/api/<method>)."""

    def __init__(
        self,
        config: HttpClientConfig | None = None,
        methods_endpoint_url_prefix: str = SLACK_API_URL,
    ) -> None:
        super().__init__(config)
        self.methods_endpoint_url_prefix = methods_endpoint_url_prefix

    async def call_method(
        self,
        method: str,
        params: dict[str, Any] | None = None,
        token: str | None = None,
        files: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Executa um método da Web API.

        Args:
            method: Nome do método (ex: chat.postMessage)
            params: Parâmetros do método
            token: Token Bearer (bot ou usuário)
            files: Arquivos para multipart (files.upload)

        Returns:
            Response JSON do Slack (inclusive quando `ok` é falso)

        Raises:
            SlackApiRequestError: Status HTTP inesperado, falha de
                transporte ou body que não é objeto JSON
        """
        url = f"{self.methods_endpoint_url_prefix}{method}"
        headers: dict[str, str] = {}
        if token:
            headers["Authorization"] = f"Bearer {token}"

        try:
            response = await self.post_form(
                url, encode_params(params or {}), headers=headers, files=files
            )
        except HttpError as exc:
            raise SlackApiRequestError(
                str(exc), method=method, status_code=exc.status_code
            ) from exc

        return self._process_api_response(response, method)

    async def send_to_response_url(
        self,
        url: str,
        payload: dict[str, Any],
    ) -> dict[str, Any] | str:
        """Envia mensagem para response_url (ou incoming webhook).

        Returns:
            JSON retornado ou o texto puro (o Slack costuma responder "ok").
        """
        if not url:
            raise ValueError("response_url é obrigatório")
        try:
            response = await self.post_json(url, json=payload)
        except HttpError as exc:
            raise SlackApiRequestError(
                str(exc), method="response_url", status_code=exc.status_code
            ) from exc

        if response.status_code >= 300:
            logger.warning(
                "response_url_failed",
                extra={"status_code": response.status_code},
            )
            raise SlackApiRequestError(
                f"response_url status {response.status_code}",
                method="response_url",
                status_code=response.status_code,
            )
        try:
            return response.json()
        except json.JSONDecodeError:
            return response.text

    def _process_api_response(
        self,
        response: httpx.Response,
        method: str,
    ) -> dict[str, Any]:
        if response.status_code >= 300:
            logger.warning(
                "slack_api_http_status",
                extra={"method": method, "status_code": response.status_code},
            )
            raise SlackApiRequestError(
                f"unexpected status {response.status_code}",
                method=method,
                status_code=response.status_code,
            )

        try:
            response_data = response.json()
        except json.JSONDecodeError as e:
            logger.error("slack_api_invalid_json", extra={"method": method})
            raise SlackApiRequestError(
                "invalid JSON response", method=method, status_code=response.status_code
            ) from e

        if not isinstance(response_data, dict):
            raise SlackApiRequestError(
                "response is not a JSON object",
                method=method,
                status_code=response.status_code,
            )

        api_error = parse_slack_error(method, response_data)
        if api_error:
            log_api_error(api_error, response.status_code)
        else:
            if response_data.get("warning"):
                log_api_warning(method, response_data["warning"])
            log_success(method, response.status_code)
        return response_data


def create_slack_http_client(
    settings: SlackSettings | None = None,
) -> SlackHttpClient:
    """Factory para criar cliente Slack com config padrão.

    Args:
        settings: SlackSettings opcional. Se None, carrega do ambiente.
    """
    # Import local para evitar dependência circular
    from config.settings import get_slack_settings

    slack = settings or get_slack_settings()
    config = HttpClientConfig(
        timeout_seconds=slack.request_timeout_seconds,
        max_retries=slack.max_retries,
    )
    return SlackHttpClient(
        config=config,
        methods_endpoint_url_prefix=slack.api_url,
    )
