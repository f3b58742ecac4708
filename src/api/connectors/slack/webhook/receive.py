"""Validação de assinatura e decodificação do corpo recebido do Slack."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any
from urllib.parse import parse_qs

from ..signature import (
    DEFAULT_TOLERANCE_SECONDS,
    SignatureResult,
    verify_slack_signature,
)

if TYPE_CHECKING:
    from collections.abc import Mapping


class WebhookRequestError(ValueError):
    """Erro base para falhas de webhook."""


class InvalidSignatureError(WebhookRequestError):
    """Assinatura inválida da requisição."""


class InvalidBodyError(WebhookRequestError):
    """Corpo não decodificável (JSON ou form inválido)."""


def _content_type(headers: Mapping[str, str]) -> str:
    for key, value in headers.items():
        if key.lower() == "content-type":
            return value.lower()
    return ""


def parse_form(text: str) -> dict[str, str]:
    """Decodifica form-urlencoded mantendo o primeiro valor de cada campo."""
    return {key: values[0] for key, values in parse_qs(text, keep_blank_values=True).items()}


def _load_json_object(text: str) -> dict[str, Any]:
    try:
        data = json.loads(text or "{}")
    except json.JSONDecodeError as exc:
        raise InvalidBodyError("invalid_json") from exc
    if not isinstance(data, dict):
        raise InvalidBodyError("payload_not_object")
    return data


def decode_body(raw_body: bytes | str, content_type: str = "") -> dict[str, Any]:
    """Decodifica o corpo conforme o Content-Type.

    - application/json: Events API
    - form com `payload`: interatividade (JSON dentro do campo)
    - demais forms: slash commands e ssl_check

    Raises:
        InvalidBodyError: Corpo inválido
    """
    try:
        text = raw_body.decode("utf-8") if isinstance(raw_body, bytes) else raw_body
    except UnicodeDecodeError as exc:
        raise InvalidBodyError("invalid_encoding") from exc

    stripped = text.lstrip()
    if content_type.startswith("application/json") or stripped.startswith("{"):
        return _load_json_object(text)

    form = parse_form(text)
    if "payload" in form:
        return _load_json_object(form["payload"])
    return form


def parse_webhook_request(
    raw_body: bytes | str,
    headers: Mapping[str, str],
    secret: str | None,
    now: float | None = None,
    tolerance_seconds: int = DEFAULT_TOLERANCE_SECONDS,
) -> tuple[dict[str, Any], SignatureResult]:
    """Valida assinatura e decodifica o corpo da requisição.

    Args:
        raw_body: Corpo bruto do request
        headers: Headers recebidos
        secret: Signing secret do app
        now: Epoch atual (injetável para testes)
        tolerance_seconds: Janela aceita para o timestamp

    Raises:
        InvalidSignatureError: Se assinatura for inválida
        InvalidBodyError: Se o corpo não puder ser decodificado

    Returns:
        (body dict, SignatureResult)
    """
    signature_result = verify_slack_signature(
        raw_body, headers, secret, now=now, tolerance_seconds=tolerance_seconds
    )
    if not signature_result.valid:
        raise InvalidSignatureError(signature_result.error or "invalid_signature")

    return decode_body(raw_body, _content_type(headers)), signature_result
