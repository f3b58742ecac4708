"""Events API: handlers por tipo e dispatcher."""

from .dispatcher import EventsDispatcher
from .handlers import (
    AppHomeOpenedHandler,
    AppMentionHandler,
    ChannelCreatedHandler,
    EventHandler,
    GroupOpenHandler,
    MemberJoinedChannelHandler,
    MessageBotHandler,
    MessageHandler,
    ReactionAddedHandler,
    ReactionRemovedHandler,
    TeamJoinHandler,
)

__all__ = [
    "AppHomeOpenedHandler",
    "AppMentionHandler",
    "ChannelCreatedHandler",
    "EventHandler",
    "EventsDispatcher",
    "GroupOpenHandler",
    "MemberJoinedChannelHandler",
    "MessageBotHandler",
    "MessageHandler",
    "ReactionAddedHandler",
    "ReactionRemovedHandler",
    "TeamJoinHandler",
]
