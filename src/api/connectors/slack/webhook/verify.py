"""Handshakes do Slack: url_verification (Events API) e ssl_check."""

from __future__ import annotations

from typing import Any


class UrlVerificationError(ValueError):
    """Payload não é um url_verification válido."""


def verify_url_verification(payload: dict[str, Any]) -> str:
    """Retorna o `challenge` a ser devolvido ao Slack.

    Raises:
        UrlVerificationError: Se o tipo for outro ou não houver challenge
    """
    if payload.get("type") != "url_verification":
        raise UrlVerificationError("not_url_verification")

    challenge = payload.get("challenge")
    if not challenge or not isinstance(challenge, str):
        raise UrlVerificationError("missing_challenge")

    return challenge


def is_ssl_check(body: dict[str, Any]) -> bool:
    """Slack envia `ssl_check=1` (com token) ao validar o certificado."""
    return str(body.get("ssl_check", "")) == "1"
