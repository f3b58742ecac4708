"""Objetos da Web API (DTOs pydantic)."""

from .base import SlackObject
from .conversation import Conversation, TopicOrPurpose
from .file import File, Paging
from .message import Message, Reaction
from .team import Team
from .user import Bot, User, Usergroup, UserProfile
from .view import View, ViewState

__all__ = [
    "Bot",
    "Conversation",
    "File",
    "Message",
    "Paging",
    "Reaction",
    "SlackObject",
    "Team",
    "TopicOrPurpose",
    "User",
    "UserProfile",
    "Usergroup",
    "View",
    "ViewState",
]
