"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    AppConfigError,
    SlackApiCallError,
    SlackApiRequestError,
    SlackSdkError,
)

__all__ = [
    "AppConfigError",
    "SlackApiCallError",
    "SlackApiRequestError",
    "SlackSdkError",
]
