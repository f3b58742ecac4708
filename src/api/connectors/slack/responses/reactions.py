"""Respostas de reactions.* e pins.*."""

from __future__ import annotations

from typing import Any

from pydantic import Field

from api.connectors.slack.models import File, Message, Paging

from .base import SlackApiResponse


class ReactionsAddResponse(SlackApiResponse):
    pass


class ReactionsRemoveResponse(SlackApiResponse):
    pass


class ReactionsGetResponse(SlackApiResponse):
    type: str | None = None
    channel: str | None = None
    message: Message | None = None
    file: File | None = None


class ReactionsListResponse(SlackApiResponse):
    items: list[dict[str, Any]] = Field(default_factory=list)
    paging: Paging | None = None


class PinsAddResponse(SlackApiResponse):
    pass


class PinsRemoveResponse(SlackApiResponse):
    pass


class PinsListResponse(SlackApiResponse):
    items: list[dict[str, Any]] = Field(default_factory=list)
