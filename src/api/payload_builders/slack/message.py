"""Payloads de mensagem para ack, response_url e incoming webhooks."""

from __future__ import annotations

from typing import Any, Literal

ResponseType = Literal["in_channel", "ephemeral"]


def build_message_payload(
    text: str | None = None,
    blocks: list[dict[str, Any]] | None = None,
    attachments: list[dict[str, Any]] | None = None,
    *,
    thread_ts: str | None = None,
    response_type: ResponseType | None = None,
    replace_original: bool | None = None,
    delete_original: bool | None = None,
    mrkdwn: bool | None = None,
) -> dict[str, Any]:
    """Monta o JSON de uma mensagem, omitindo campos não informados.

    Raises:
        ValueError: Sem text/blocks/attachments (exceto delete_original)
    """
    if not delete_original and not (text or blocks or attachments):
        raise ValueError("mensagem precisa de text, blocks ou attachments")
    if response_type is not None and response_type not in ("in_channel", "ephemeral"):
        raise ValueError(f"response_type inválido: {response_type}")

    fields: dict[str, Any] = {
        "text": text,
        "blocks": blocks,
        "attachments": attachments,
        "thread_ts": thread_ts,
        "response_type": response_type,
        "replace_original": replace_original,
        "delete_original": delete_original,
        "mrkdwn": mrkdwn,
    }
    return {key: value for key, value in fields.items() if value is not None}


def build_options_payload(
    options: list[dict[str, Any]] | None = None,
    option_groups: list[dict[str, Any]] | None = None,
) -> dict[str, Any]:
    """Resposta de block_suggestion / dialog_suggestion (menus externos)."""
    if options is not None and option_groups is not None:
        raise ValueError("informe options ou option_groups, não ambos")
    if option_groups is not None:
        return {"option_groups": option_groups}
    return {"options": options or []}


def plain_text_option(text: str, value: str) -> dict[str, Any]:
    return {"text": {"type": "plain_text", "text": text}, "value": value}
