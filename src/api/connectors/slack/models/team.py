"""Workspace (team)."""

from __future__ import annotations

from typing import Any

from .base import SlackObject


class Team(SlackObject):
    id: str
    name: str | None = None
    domain: str | None = None
    email_domain: str | None = None
    enterprise_id: str | None = None
    enterprise_name: str | None = None
    icon: dict[str, Any] | None = None
