"""Filters de logging para injeção de contexto e mascaramento.

Campos injetados:
- correlation_id: ID de rastreamento da requisição
- service: Nome do serviço
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable

# xoxb- (bot), xoxp- (user), xoxa-/xoxr- (app/refresh), xapp- (app-level)
_TOKEN_PATTERN = re.compile(r"\b(xox[abprs]|xapp)-[A-Za-z0-9-]+")


def redact_tokens(text: str) -> str:
    """Substitui tokens Slack por `<prefixo>-***`."""
    return _TOKEN_PATTERN.sub(lambda m: f"{m.group(1)}-***", text)


class CorrelationIdFilter(logging.Filter):
    """Injeta correlation_id e service em cada record de log.

    Args:
        service_name: Nome do serviço para identificação nos logs.
        correlation_id_getter: Função que retorna o correlation_id atual.
            Se não fornecida, usa string vazia.
    """

    def __init__(
        self,
        service_name: str,
        correlation_id_getter: Callable[[], str] | None = None,
    ) -> None:
        super().__init__()
        self._service_name = service_name
        self._get_correlation_id = correlation_id_getter or (lambda: "")

    def filter(self, record: logging.LogRecord) -> bool:
        # Preservar correlation_id passado explicitamente via `extra`
        existing = getattr(record, "correlation_id", None)
        record.correlation_id = existing if existing else self._get_correlation_id()
        record.service = self._service_name
        return True


class TokenRedactionFilter(logging.Filter):
    """Mascara tokens Slack na mensagem final do record.

    A mensagem é renderizada (msg % args) uma única vez aqui; o record
    segue sem args para o formatter.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        message = record.getMessage()
        redacted = redact_tokens(message)
        if redacted != message:
            record.msg = redacted
            record.args = None
        return True
