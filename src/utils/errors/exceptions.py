"""Exceções compartilhadas do SDK Slack."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from api.connectors.slack.slack_errors import SlackApiError


class SlackSdkError(RuntimeError):
    """Base para falhas do SDK."""


class SlackApiRequestError(SlackSdkError):
    """Falha de transporte ou status HTTP inesperado na Web API.

    Nunca carrega tokens ou corpo da requisição na mensagem.
    """

    def __init__(
        self,
        message: str,
        method: str | None = None,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.method = method
        self.status_code = status_code


class SlackApiCallError(SlackSdkError):
    """Resposta `ok: false` da Web API."""

    def __init__(self, api_error: SlackApiError) -> None:
        super().__init__(f"{api_error.method}: {api_error.error}")
        self.api_error = api_error

    @property
    def error(self) -> str:
        return self.api_error.error


class AppConfigError(SlackSdkError):
    """Configuração inválida do App."""
