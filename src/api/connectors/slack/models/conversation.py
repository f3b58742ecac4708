"""Conversas: canais públicos, privados, DMs e MPIMs."""

from __future__ import annotations

from .base import SlackObject


class TopicOrPurpose(SlackObject):
    value: str = ""
    creator: str | None = None
    last_set: int | None = None


class Conversation(SlackObject):
    id: str
    name: str | None = None
    is_channel: bool | None = None
    is_group: bool | None = None
    is_im: bool | None = None
    is_mpim: bool | None = None
    is_private: bool | None = None
    is_archived: bool | None = None
    is_general: bool | None = None
    is_member: bool | None = None
    is_shared: bool | None = None
    is_ext_shared: bool | None = None
    created: int | None = None
    creator: str | None = None
    user: str | None = None
    topic: TopicOrPurpose | None = None
    purpose: TopicOrPurpose | None = None
    num_members: int | None = None
