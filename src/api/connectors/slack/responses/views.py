"""Respostas de views.*."""

from __future__ import annotations

from api.connectors.slack.models import View

from .base import SlackApiResponse


class ViewResponse(SlackApiResponse):
    view: View | None = None


class ViewsOpenResponse(ViewResponse):
    pass


class ViewsPushResponse(ViewResponse):
    pass


class ViewsUpdateResponse(ViewResponse):
    pass


class ViewsPublishResponse(ViewResponse):
    pass
