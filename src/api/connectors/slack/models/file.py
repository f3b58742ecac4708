"""Arquivos compartilhados."""

from __future__ import annotations

from pydantic import Field

from .base import SlackObject


class File(SlackObject):
    id: str
    name: str | None = None
    title: str | None = None
    mimetype: str | None = None
    filetype: str | None = None
    pretty_type: str | None = None
    user: str | None = None
    size: int | None = None
    created: int | None = None
    is_public: bool | None = None
    public_url_shared: bool | None = None
    url_private: str | None = None
    url_private_download: str | None = None
    permalink: str | None = None
    permalink_public: str | None = None
    channels: list[str] = Field(default_factory=list)
    groups: list[str] = Field(default_factory=list)
    ims: list[str] = Field(default_factory=list)


class Paging(SlackObject):
    count: int | None = None
    total: int | None = None
    page: int | None = None
    pages: int | None = None
