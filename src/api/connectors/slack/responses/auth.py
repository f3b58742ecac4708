"""Respostas de api.* e auth.*."""

from __future__ import annotations

from typing import Any

from pydantic import Field

from .base import SlackApiResponse


class ApiTestResponse(SlackApiResponse):
    args: dict[str, Any] = Field(default_factory=dict)


class AuthTestResponse(SlackApiResponse):
    url: str | None = None
    team: str | None = None
    user: str | None = None
    team_id: str | None = None
    user_id: str | None = None
    bot_id: str | None = None
    enterprise_id: str | None = None
    is_enterprise_install: bool | None = None


class AuthRevokeResponse(SlackApiResponse):
    revoked: bool | None = None
