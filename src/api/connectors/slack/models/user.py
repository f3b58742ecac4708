"""Usuários, bots e grupos de usuários."""

from __future__ import annotations

from pydantic import Field

from .base import SlackObject


class UserProfile(SlackObject):
    real_name: str | None = None
    display_name: str | None = None
    email: str | None = None
    title: str | None = None
    status_text: str | None = None
    status_emoji: str | None = None
    image_72: str | None = None
    bot_id: str | None = None


class User(SlackObject):
    id: str
    team_id: str | None = None
    name: str | None = None
    real_name: str | None = None
    deleted: bool | None = None
    is_bot: bool | None = None
    is_app_user: bool | None = None
    is_admin: bool | None = None
    is_owner: bool | None = None
    is_restricted: bool | None = None
    tz: str | None = None
    tz_offset: int | None = None
    updated: int | None = None
    profile: UserProfile | None = None


class Bot(SlackObject):
    id: str
    name: str | None = None
    app_id: str | None = None
    user_id: str | None = None
    deleted: bool | None = None
    updated: int | None = None
    icons: dict[str, str] = Field(default_factory=dict)


class Usergroup(SlackObject):
    id: str
    team_id: str | None = None
    name: str | None = None
    handle: str | None = None
    description: str | None = None
    is_external: bool | None = None
    user_count: int | None = None
    users: list[str] = Field(default_factory=list)
    date_create: int | None = None
    date_delete: int | None = None
