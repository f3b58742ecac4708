"""Identificador estável de uma requisição recebida (retries inclusos)."""

from __future__ import annotations

import hashlib
import json
from typing import Any


def compute_inbound_event_id(payload: dict[str, Any], raw_body: bytes) -> str:
    """Gera chave estável baseada em event_id, trigger_id ou hash do corpo.

    O Slack reenvia o mesmo event_id nos retries (X-Slack-Retry-Num).

    Args:
        payload: Corpo decodificado
        raw_body: Corpo bruto do request
    """
    for key in ("event_id", "trigger_id"):
        value = payload.get(key)
        if isinstance(value, str) and value:
            return value

    digest = hashlib.sha256(
        raw_body or json.dumps(payload, sort_keys=True).encode("utf-8")
    ).hexdigest()
    return f"payload:{digest}"
