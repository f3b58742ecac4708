"""Erros e helpers de parsing para respostas `ok: false` da Web API."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

# Erros que não mudam com retry: credencial, escopo ou argumento
PERMANENT_ERRORS = frozenset(
    {
        "not_authed",
        "invalid_auth",
        "account_inactive",
        "token_revoked",
        "token_expired",
        "no_permission",
        "missing_scope",
        "not_allowed_token_type",
        "invalid_arguments",
        "invalid_arg_name",
        "invalid_form_data",
        "invalid_json",
        "channel_not_found",
        "user_not_found",
        "file_not_found",
        "message_not_found",
        "not_in_channel",
        "is_archived",
        "invalid_blocks",
        "invalid_trigger_id",
        "expired_trigger_id",
        "view_not_found",
        "already_reacted",
        "no_reaction",
        "already_pinned",
        "no_pin",
    }
)

TRANSIENT_ERRORS = frozenset(
    {
        "ratelimited",
        "rate_limited",
        "internal_error",
        "fatal_error",
        "service_unavailable",
        "request_timeout",
    }
)


@dataclass(frozen=True)
class SlackApiError:
    """Erro retornado pela Web API (`ok: false`)."""

    method: str
    error: str
    needed: str | None = None
    provided: str | None = None
    warning: str | None = None
    is_permanent: bool = True


def is_permanent_error(error: str) -> bool:
    """Classifica erro como permanente ou transitório.

    Códigos desconhecidos são tratados como permanentes.
    """
    if error in TRANSIENT_ERRORS:
        return False
    return True


def parse_slack_error(method: str, response_data: dict[str, Any]) -> SlackApiError | None:
    """Extrai informações de erro do response da Web API.

    Args:
        method: Nome do método chamado (ex: chat.postMessage)
        response_data: Dict do response JSON

    Returns:
        SlackApiError se `ok` for falso, None se sucesso
    """
    if response_data.get("ok") is True:
        return None

    error = response_data.get("error") or "unknown_error"
    return SlackApiError(
        method=method,
        error=error,
        needed=response_data.get("needed"),
        provided=response_data.get("provided"),
        warning=response_data.get("warning"),
        is_permanent=is_permanent_error(error),
    )
