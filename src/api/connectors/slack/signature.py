"""Assinatura HMAC-SHA256 das requisições enviadas pelo Slack.

Base da assinatura: "v0:<X-Slack-Request-Timestamp>:<corpo bruto>".
Header X-Slack-Signature: "v0=" + hexdigest.
"""

from __future__ import annotations

import hashlib
import hmac
import time
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping

SIGNATURE_HEADER = "X-Slack-Signature"
TIMESTAMP_HEADER = "X-Slack-Request-Timestamp"
SIGNATURE_VERSION = "v0"
DEFAULT_TOLERANCE_SECONDS = 60 * 5


@dataclass(frozen=True)
class SignatureResult:
    """Resultado da validação de assinatura."""

    valid: bool
    skipped: bool = False
    error: str | None = None


def _get_header(headers: Mapping[str, str], name: str) -> str | None:
    lowered = name.lower()
    for key, value in headers.items():
        if key.lower() == lowered:
            return value
    return None


def _as_bytes(body: bytes | str) -> bytes:
    if isinstance(body, str):
        return body.encode("utf-8")
    return body


def generate_slack_signature(secret: str, timestamp: str | int, body: bytes | str) -> str:
    """Gera o valor esperado de X-Slack-Signature."""
    base = f"{SIGNATURE_VERSION}:{timestamp}:".encode("utf-8") + _as_bytes(body)
    digest = hmac.new(secret.encode("utf-8"), base, hashlib.sha256).hexdigest()
    return f"{SIGNATURE_VERSION}={digest}"


def build_signed_headers(
    secret: str,
    body: bytes | str,
    timestamp: int | None = None,
) -> dict[str, str]:
    """Headers de assinatura para um corpo (útil em testes e proxies)."""
    ts = str(int(time.time()) if timestamp is None else timestamp)
    return {
        TIMESTAMP_HEADER: ts,
        SIGNATURE_HEADER: generate_slack_signature(secret, ts, body),
    }


def verify_slack_signature(
    raw_body: bytes | str,
    headers: Mapping[str, str],
    secret: str | None,
    now: float | None = None,
    tolerance_seconds: int = DEFAULT_TOLERANCE_SECONDS,
) -> SignatureResult:
    """Valida X-Slack-Signature contra o corpo bruto.

    Args:
        raw_body: Corpo bruto, exatamente como recebido
        headers: Headers da requisição (lookup case-insensitive)
        secret: Signing secret do app. Vazio/None pula a validação.
        now: Epoch atual (injetável para testes)
        tolerance_seconds: Diferença máxima aceita para o timestamp

    Returns:
        SignatureResult
    """
    if not secret:
        return SignatureResult(valid=True, skipped=True)

    signature = _get_header(headers, SIGNATURE_HEADER)
    if not signature:
        return SignatureResult(valid=False, error="missing_signature")

    timestamp = _get_header(headers, TIMESTAMP_HEADER)
    if not timestamp:
        return SignatureResult(valid=False, error="missing_timestamp")

    try:
        ts = int(timestamp)
    except ValueError:
        return SignatureResult(valid=False, error="invalid_timestamp")

    current = time.time() if now is None else now
    if abs(current - ts) > tolerance_seconds:
        return SignatureResult(valid=False, error="stale_timestamp")

    expected = generate_slack_signature(secret, timestamp, raw_body)
    if not hmac.compare_digest(expected, signature):
        return SignatureResult(valid=False, error="signature_mismatch")

    return SignatureResult(valid=True)
