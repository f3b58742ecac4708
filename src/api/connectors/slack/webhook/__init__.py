"""Webhook Slack: assinatura, decodificação e handshakes."""

from ..signature import SignatureResult, verify_slack_signature
from .receive import (
    InvalidBodyError,
    InvalidSignatureError,
    WebhookRequestError,
    decode_body,
    parse_form,
    parse_webhook_request,
)
from .verify import UrlVerificationError, is_ssl_check, verify_url_verification

__all__ = [
    "InvalidBodyError",
    "InvalidSignatureError",
    "SignatureResult",
    "UrlVerificationError",
    "WebhookRequestError",
    "decode_body",
    "is_ssl_check",
    "parse_form",
    "parse_webhook_request",
    "verify_slack_signature",
    "verify_url_verification",
]
