"""Respostas de files.*."""

from __future__ import annotations

from pydantic import Field

from api.connectors.slack.models import File, Paging

from .base import SlackApiResponse


class FileResponse(SlackApiResponse):
    """Respostas que trazem um único `file`."""

    file: File | None = None


class FilesListResponse(SlackApiResponse):
    files: list[File] = Field(default_factory=list)
    paging: Paging | None = None


class FilesInfoResponse(FileResponse):
    content: str | None = None
    is_truncated: bool | None = None
    paging: Paging | None = None


class FilesDeleteResponse(SlackApiResponse):
    pass


class FilesUploadResponse(FileResponse):
    pass


class FilesSharedPublicURLResponse(FileResponse):
    pass


class FilesRevokePublicURLResponse(FileResponse):
    pass
