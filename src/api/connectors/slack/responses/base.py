"""Base de todas as respostas da Web API."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from api.connectors.slack.slack_errors import SlackApiError, parse_slack_error
from utils.errors import SlackApiCallError


class ResponseMetadata(BaseModel):
    model_config = ConfigDict(extra="allow")

    next_cursor: str | None = None
    messages: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)


class SlackApiResponse(BaseModel):
    """Campos comuns: ok, warning, error, needed, provided."""

    model_config = ConfigDict(extra="allow")

    ok: bool = False
    warning: str | None = None
    error: str | None = None
    needed: str | None = None
    provided: str | None = None
    response_metadata: ResponseMetadata | None = None

    @property
    def next_cursor(self) -> str | None:
        if self.response_metadata is None:
            return None
        return self.response_metadata.next_cursor or None

    def to_error(self, method: str) -> SlackApiError | None:
        return parse_slack_error(method, self.model_dump())

    def raise_for_error(self, method: str) -> None:
        """Levanta SlackApiCallError se `ok` for falso."""
        api_error = self.to_error(method)
        if api_error is not None:
            raise SlackApiCallError(api_error)
