"""Bindings tipadas da Web API.

Uso:
    client = MethodsClient(token="xoxb-...")
    response = await client.chat_post_message(channel="C123", text="oi")
    if not response.ok:
        ...

    async for member in client.paginate("users.list", UsersListResponse, "members"):
        ...
"""

from __future__ import annotations

from .auth import AuthMethods
from .base import BaseMethods
from .chat import ChatMethods
from .conversations import ConversationsMethods
from .files import FilesMethods
from .reactions import PinsMethods, ReactionsMethods
from .team import TeamMethods
from .users import UsersMethods
from .views import ViewsMethods


class MethodsClient(
    AuthMethods,
    ChatMethods,
    ConversationsMethods,
    UsersMethods,
    FilesMethods,
    ViewsMethods,
    ReactionsMethods,
    PinsMethods,
    TeamMethods,
):
    """Cliente completo: todas as famílias de métodos sobre um SlackHttpClient."""


__all__ = [
    "AuthMethods",
    "BaseMethods",
    "ChatMethods",
    "ConversationsMethods",
    "FilesMethods",
    "MethodsClient",
    "PinsMethods",
    "ReactionsMethods",
    "TeamMethods",
    "UsersMethods",
    "ViewsMethods",
]
