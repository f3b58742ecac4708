"""Configuração de logging estruturado.

Uso:
    from config.logging import configure_logging, get_logger

    # Na inicialização (bootstrap)
    configure_logging(level="INFO", service_name="slack-app-kit")

    # Em qualquer módulo
    logger = get_logger(__name__)
    logger.info("slack_api_call", extra={"method": "chat.postMessage"})

Campos obrigatórios em todo log:
- correlation_id
- service
- level
- logger
- message
- asctime

Tokens Slack (xoxb-, xoxp-, ...) são mascarados antes da formatação.
"""

from config.logging.config import DEFAULT_SERVICE_NAME, configure_logging, get_logger
from config.logging.filters import CorrelationIdFilter, TokenRedactionFilter, redact_tokens
from config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "DEFAULT_SERVICE_NAME",
    "FIELD_RENAME_MAP",
    "REQUIRED_LOG_FIELDS",
    # Filters
    "CorrelationIdFilter",
    "TokenRedactionFilter",
    # Configuração principal
    "configure_logging",
    # Formatters
    "create_json_formatter",
    "get_logger",
    "redact_tokens",
]
