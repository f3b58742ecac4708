"""Mensagens e reações."""

from __future__ import annotations

from typing import Any

from pydantic import Field

from .base import SlackObject


class Reaction(SlackObject):
    name: str
    count: int = 0
    users: list[str] = Field(default_factory=list)


class Message(SlackObject):
    """Mensagem de canal, DM ou thread."""

    type: str = "message"
    subtype: str | None = None
    ts: str | None = None
    user: str | None = None
    bot_id: str | None = None
    app_id: str | None = None
    team: str | None = None
    text: str | None = None
    thread_ts: str | None = None
    parent_user_id: str | None = None
    reply_count: int | None = None
    reply_users: list[str] = Field(default_factory=list)
    latest_reply: str | None = None
    blocks: list[dict[str, Any]] = Field(default_factory=list)
    attachments: list[dict[str, Any]] = Field(default_factory=list)
    reactions: list[Reaction] = Field(default_factory=list)
    edited: dict[str, Any] | None = None
    permalink: str | None = None

    @property
    def is_thread_reply(self) -> bool:
        return self.thread_ts is not None and self.thread_ts != self.ts
