"""Bootstrap da aplicação: logging, validação de settings e App padrão.

Uso:
    from app.bootstrap import create_bolt_app, initialize_app

    # Na inicialização do serviço
    initialize_app()
    bolt_app = create_bolt_app()
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.bolt import App, AppConfig
from app.observability import get_correlation_id
from config.logging import configure_logging
from config.settings import get_base_settings, get_slack_settings

if TYPE_CHECKING:
    from config.settings import SlackSettings

STRICT_VALIDATION_ENVS = {"staging", "production"}

logger = logging.getLogger(__name__)


def initialize_app() -> None:
    """Configura logging JSON com correlation_id.

    Deve ser chamada uma vez no início do serviço.
    """
    base = get_base_settings()
    configure_logging(
        level=base.log_level,
        service_name=base.service_name,
        correlation_id_getter=get_correlation_id,
    )


def validate_runtime_settings() -> None:
    """Valida settings obrigatórias no startup.

    Em `staging`/`production` falha rápido para impedir boot inválido.
    Em `development`/`test` mantém alerta sem bloquear execução local.
    """
    base = get_base_settings()
    environment = base.environment
    errors: list[str] = []
    errors.extend(f"base: {error}" for error in base.validate())
    errors.extend(f"slack: {error}" for error in get_slack_settings().validate())

    if not errors:
        logger.info(
            "settings_validated",
            extra={"component": "bootstrap", "result": "ok", "environment": environment},
        )
        return

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "result": "failed",
            "environment": environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    if environment in STRICT_VALIDATION_ENVS:
        details = "\n".join(f"- {error}" for error in errors)
        raise RuntimeError(f"Configuração inválida para {environment}:\n{details}")


def create_bolt_app(settings: SlackSettings | None = None) -> App:
    """Cria o App a partir de SlackSettings (ambiente por padrão).

    Raises:
        AppConfigError: Verificação de assinatura habilitada sem signing secret
    """
    slack = settings or get_slack_settings()
    return App(AppConfig.from_settings(slack))
