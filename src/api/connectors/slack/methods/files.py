"""files.*"""

from __future__ import annotations

from typing import Any

from api.connectors.slack.responses import (
    FilesDeleteResponse,
    FilesInfoResponse,
    FilesListResponse,
    FilesRevokePublicURLResponse,
    FilesSharedPublicURLResponse,
    FilesUploadResponse,
)

from .base import BaseMethods, require, require_one_of


class FilesMethods(BaseMethods):
    async def files_list(self, *, token: str | None = None, **params: Any) -> FilesListResponse:
        return await self._call("files.list", FilesListResponse, params, token=token)

    async def files_info(
        self, *, file: str, token: str | None = None, **params: Any
    ) -> FilesInfoResponse:
        require("files.info", file=file)
        params["file"] = file
        return await self._call("files.info", FilesInfoResponse, params, token=token)

    async def files_delete(
        self, *, file: str, token: str | None = None, **params: Any
    ) -> FilesDeleteResponse:
        require("files.delete", file=file)
        params["file"] = file
        return await self._call("files.delete", FilesDeleteResponse, params, token=token)

    async def files_upload(
        self,
        *,
        content: str | None = None,
        file: bytes | None = None,
        filename: str | None = None,
        channels: list[str] | str | None = None,
        token: str | None = None,
        **params: Any,
    ) -> FilesUploadResponse:
        """Envia arquivo como texto (`content`) ou binário (`file`, multipart)."""
        require_one_of("files.upload", content=content, file=file)
        if isinstance(channels, list):
            channels = ",".join(channels)
        params.update(content=content, filename=filename, channels=channels)
        files = None
        if file is not None:
            files = {"file": (filename or "upload.bin", file)}
        return await self._call(
            "files.upload", FilesUploadResponse, params, token=token, files=files
        )

    async def files_shared_public_url(
        self, *, file: str, token: str | None = None, **params: Any
    ) -> FilesSharedPublicURLResponse:
        """Exige token de usuário (xoxp-)."""
        require("files.sharedPublicURL", file=file)
        params["file"] = file
        return await self._call(
            "files.sharedPublicURL", FilesSharedPublicURLResponse, params, token=token
        )

    async def files_revoke_public_url(
        self, *, file: str, token: str | None = None, **params: Any
    ) -> FilesRevokePublicURLResponse:
        """Exige token de usuário (xoxp-)."""
        require("files.revokePublicURL", file=file)
        params["file"] = file
        return await self._call(
            "files.revokePublicURL", FilesRevokePublicURLResponse, params, token=token
        )
