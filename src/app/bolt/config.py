"""Configuração do App."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from config.settings.slack import SIGNATURE_TOLERANCE_SECONDS

if TYPE_CHECKING:
    from config.settings import SlackSettings


@dataclass(frozen=True)
class AppConfig:
    """Credenciais e middlewares embutidos habilitados.

    Attributes:
        signing_secret: Secret para RequestVerification
        single_team_bot_token: Token do bot para instalação em um workspace
        request_verification_enabled: Valida X-Slack-Signature
        ssl_check_enabled: Responde ssl_check=1 com 200
        ignoring_self_events_enabled: Descarta eventos do próprio bot
        url_verification_enabled: Responde o challenge da Events API
        signature_tolerance_seconds: Janela aceita para o timestamp assinado
    """

    signing_secret: str | None = None
    single_team_bot_token: str | None = None
    request_verification_enabled: bool = True
    ssl_check_enabled: bool = True
    ignoring_self_events_enabled: bool = True
    url_verification_enabled: bool = True
    signature_tolerance_seconds: int = SIGNATURE_TOLERANCE_SECONDS

    @classmethod
    def from_settings(cls, settings: SlackSettings) -> AppConfig:
        return cls(
            signing_secret=settings.signing_secret or None,
            single_team_bot_token=settings.bot_token or None,
            request_verification_enabled=settings.request_verification_enabled,
            ssl_check_enabled=settings.ssl_check_enabled,
            ignoring_self_events_enabled=settings.ignoring_self_events_enabled,
            signature_tolerance_seconds=settings.signature_tolerance_seconds,
        )

    def validate(self) -> list[str]:
        errors: list[str] = []
        if self.request_verification_enabled and not self.signing_secret:
            errors.append("signing_secret é obrigatório com request_verification_enabled")
        if self.signature_tolerance_seconds <= 0:
            errors.append("signature_tolerance_seconds deve ser > 0")
        return errors
