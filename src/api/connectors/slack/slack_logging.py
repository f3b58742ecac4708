"""Helpers de logging da Web API (sem tokens, textos ou ids de usuário)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .slack_errors import SlackApiError

logger = logging.getLogger(__name__)


def log_api_error(api_error: SlackApiError, status_code: int) -> None:
    logger.warning(
        "slack_api_error",
        extra={
            "method": api_error.method,
            "error": api_error.error,
            "needed": api_error.needed,
            "status_code": status_code,
            "is_permanent": api_error.is_permanent,
        },
    )


def log_api_warning(method: str, warning: str) -> None:
    logger.info("slack_api_warning", extra={"method": method, "warning": warning})


def log_success(method: str, status_code: int) -> None:
    logger.debug(
        "slack_api_success",
        extra={"method": method, "status_code": status_code},
    )
