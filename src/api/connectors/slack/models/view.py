"""Views (modais e App Home)."""

from __future__ import annotations

from typing import Any

from pydantic import Field

from .base import SlackObject


class ViewState(SlackObject):
    # block_id -> action_id -> valor (formato depende do tipo do elemento)
    values: dict[str, dict[str, dict[str, Any]]] = Field(default_factory=dict)


class View(SlackObject):
    id: str | None = None
    team_id: str | None = None
    app_id: str | None = None
    bot_id: str | None = None
    type: str | None = None
    callback_id: str | None = None
    external_id: str | None = None
    private_metadata: str | None = None
    hash: str | None = None
    title: dict[str, Any] | None = None
    submit: dict[str, Any] | None = None
    close: dict[str, Any] | None = None
    blocks: list[dict[str, Any]] = Field(default_factory=list)
    state: ViewState | None = None
    root_view_id: str | None = None
    previous_view_id: str | None = None
    notify_on_close: bool | None = None
    clear_on_close: bool | None = None
