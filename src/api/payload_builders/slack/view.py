"""response_action para ack de view_submission."""

from __future__ import annotations

from typing import Any, Literal

ResponseAction = Literal["errors", "update", "push", "clear"]


def build_view_response(
    action: ResponseAction,
    view: dict[str, Any] | None = None,
    errors: dict[str, str] | None = None,
) -> dict[str, Any]:
    """Monta o corpo do ack de view_submission.

    - errors: mensagens por block_id
    - update/push: substitui ou empilha `view`
    - clear: fecha todas as views
    """
    if action == "errors":
        if not errors:
            raise ValueError("response_action=errors exige errors por block_id")
        return {"response_action": "errors", "errors": errors}
    if action in ("update", "push"):
        if not view:
            raise ValueError(f"response_action={action} exige view")
        return {"response_action": action, "view": view}
    if action == "clear":
        return {"response_action": "clear"}
    raise ValueError(f"response_action inválido: {action}")
