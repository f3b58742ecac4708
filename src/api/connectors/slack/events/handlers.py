"""Handlers de evento por tipo, para uso com EventsDispatcher."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Awaitable

    from api.connectors.slack.payloads import EventsApiPayload


class EventHandler(ABC):
    """Handler de um tipo de evento (`event_type`, com subtype quando houver).

    `handle` pode ser síncrono ou assíncrono.
    """

    event_type: str = ""

    def get_event_type(self) -> str:
        if not self.event_type:
            raise NotImplementedError(f"{type(self).__name__} sem event_type")
        return self.event_type

    @abstractmethod
    def handle(self, payload: EventsApiPayload) -> Awaitable[None] | None: ...


class AppMentionHandler(EventHandler):
    event_type = "app_mention"


class AppHomeOpenedHandler(EventHandler):
    event_type = "app_home_opened"


class MessageHandler(EventHandler):
    event_type = "message"


class MessageBotHandler(EventHandler):
    event_type = "message:bot_message"


class ReactionAddedHandler(EventHandler):
    event_type = "reaction_added"


class ReactionRemovedHandler(EventHandler):
    event_type = "reaction_removed"


class MemberJoinedChannelHandler(EventHandler):
    event_type = "member_joined_channel"


class ChannelCreatedHandler(EventHandler):
    event_type = "channel_created"


class GroupOpenHandler(EventHandler):
    event_type = "group_open"


class TeamJoinHandler(EventHandler):
    event_type = "team_join"
