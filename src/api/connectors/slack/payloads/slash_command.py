"""Payload de slash command (form-urlencoded)."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class SlashCommandPayload(BaseModel):
    model_config = ConfigDict(extra="ignore")

    token: str | None = None
    command: str
    text: str = ""
    team_id: str | None = None
    team_domain: str | None = None
    enterprise_id: str | None = None
    enterprise_name: str | None = None
    channel_id: str | None = None
    channel_name: str | None = None
    user_id: str | None = None
    user_name: str | None = None
    api_app_id: str | None = None
    response_url: str | None = None
    trigger_id: str | None = None
    is_enterprise_install: bool | None = None
