"""Settings específicas do Slack.

Credenciais do app, endpoint da Web API e chaves de liga/desliga
dos middlewares embutidos do App.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

SLACK_API_URL: str = "https://slack.com/api/"
SIGNATURE_TOLERANCE_SECONDS: int = 60 * 5
DEFAULT_EVENTS_PATH: str = "/slack/events"


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in ("true", "1", "yes")


@dataclass(frozen=True)
class SlackSettings:
    """Configurações do app Slack.

    Attributes:
        signing_secret: Secret para validação HMAC das requisições
        bot_token: Token do bot (xoxb-) para instalação em um único workspace
        api_url: Prefixo dos métodos da Web API (terminado em /)
        request_timeout_seconds: Timeout das chamadas HTTP
        max_retries: Tentativas extras em 429/5xx
        request_verification_enabled: Valida X-Slack-Signature
        ssl_check_enabled: Responde ssl_check=1 automaticamente
        ignoring_self_events_enabled: Descarta eventos gerados pelo próprio bot
        signature_tolerance_seconds: Janela aceita para X-Slack-Request-Timestamp
        events_path: Rota HTTP que recebe eventos e interações
    """

    signing_secret: str = ""
    bot_token: str = ""

    api_url: str = SLACK_API_URL
    request_timeout_seconds: float = 30.0
    max_retries: int = 3

    request_verification_enabled: bool = True
    ssl_check_enabled: bool = True
    ignoring_self_events_enabled: bool = True
    signature_tolerance_seconds: int = SIGNATURE_TOLERANCE_SECONDS

    events_path: str = DEFAULT_EVENTS_PATH

    def get_method_url(self, method: str) -> str:
        """Retorna URL completa de um método (ex: chat.postMessage)."""
        if not method:
            raise ValueError("method é obrigatório")
        return f"{self.api_url}{method}"

    def validate(self) -> list[str]:
        """Valida configurações mínimas do Slack.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if self.request_verification_enabled and not self.signing_secret:
            errors.append("SLACK_SIGNING_SECRET não configurado")

        if self.bot_token and not self.bot_token.startswith("xox"):
            errors.append("SLACK_BOT_TOKEN em formato inesperado")

        if not self.api_url.endswith("/"):
            errors.append("SLACK_API_URL deve terminar com '/'")

        if self.request_timeout_seconds <= 0:
            errors.append("SLACK_REQUEST_TIMEOUT_SECONDS deve ser > 0")

        if self.max_retries < 0:
            errors.append("SLACK_MAX_RETRIES deve ser >= 0")

        if self.signature_tolerance_seconds <= 0:
            errors.append("SLACK_SIGNATURE_TOLERANCE_SECONDS deve ser > 0")

        if not self.events_path.startswith("/"):
            errors.append("SLACK_EVENTS_PATH deve começar com '/'")

        return errors


def _load_from_env() -> SlackSettings:
    """Carrega SlackSettings a partir de variáveis de ambiente."""
    return SlackSettings(
        signing_secret=os.getenv("SLACK_SIGNING_SECRET", ""),
        bot_token=os.getenv("SLACK_BOT_TOKEN", ""),
        api_url=os.getenv("SLACK_API_URL", SLACK_API_URL),
        request_timeout_seconds=float(
            os.getenv("SLACK_REQUEST_TIMEOUT_SECONDS", "30")
        ),
        max_retries=int(os.getenv("SLACK_MAX_RETRIES", "3")),
        request_verification_enabled=_env_flag(
            "SLACK_REQUEST_VERIFICATION_ENABLED", True
        ),
        ssl_check_enabled=_env_flag("SLACK_SSL_CHECK_ENABLED", True),
        ignoring_self_events_enabled=_env_flag(
            "SLACK_IGNORING_SELF_EVENTS_ENABLED", True
        ),
        signature_tolerance_seconds=int(
            os.getenv(
                "SLACK_SIGNATURE_TOLERANCE_SECONDS", str(SIGNATURE_TOLERANCE_SECONDS)
            )
        ),
        events_path=os.getenv("SLACK_EVENTS_PATH", DEFAULT_EVENTS_PATH),
    )


@lru_cache(maxsize=1)
def get_slack_settings() -> SlackSettings:
    """Retorna instância cacheada de SlackSettings.

    A cache garante singleton para múltiplas injeções.
    """
    return _load_from_env()
