"""Agregador de settings do serviço.

Re-exporta todas as settings e funções de cada módulo.
"""

from __future__ import annotations

from config.settings.base import (
    VALID_LOG_LEVELS,
    BaseSettings,
    Environment,
    get_base_settings,
)
from config.settings.slack import (
    DEFAULT_EVENTS_PATH,
    SIGNATURE_TOLERANCE_SECONDS,
    SLACK_API_URL,
    SlackSettings,
    get_slack_settings,
)

__all__ = [
    # Constants
    "DEFAULT_EVENTS_PATH",
    "SIGNATURE_TOLERANCE_SECONDS",
    "SLACK_API_URL",
    "VALID_LOG_LEVELS",
    # Base
    "BaseSettings",
    "Environment",
    # Channels
    "SlackSettings",
    "get_base_settings",
    "get_slack_settings",
]
