"""Builders de payload Slack (mensagens, opções e respostas de view)."""

from .message import (
    ResponseType,
    build_message_payload,
    build_options_payload,
    plain_text_option,
)
from .view import ResponseAction, build_view_response

__all__ = [
    "ResponseAction",
    "ResponseType",
    "build_message_payload",
    "build_options_payload",
    "build_view_response",
    "plain_text_option",
]
