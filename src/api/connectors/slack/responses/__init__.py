"""Respostas tipadas da Web API, uma classe por método."""

from .base import (
    ResponseMetadata,
    SlackApiResponse,
)
from .auth import (
    ApiTestResponse,
    AuthRevokeResponse,
    AuthTestResponse,
)
from .chat import (
    ChatDeleteResponse,
    ChatDeleteScheduledMessageResponse,
    ChatGetPermalinkResponse,
    ChatMeMessageResponse,
    ChatPostEphemeralResponse,
    ChatPostMessageResponse,
    ChatScheduleMessageResponse,
    ChatUpdateResponse,
)
from .conversations import (
    ConversationResponse,
    ConversationsArchiveResponse,
    ConversationsCloseResponse,
    ConversationsCreateResponse,
    ConversationsHistoryResponse,
    ConversationsInfoResponse,
    ConversationsInviteResponse,
    ConversationsJoinResponse,
    ConversationsKickResponse,
    ConversationsLeaveResponse,
    ConversationsListResponse,
    ConversationsMembersResponse,
    ConversationsOpenResponse,
    ConversationsRenameResponse,
    ConversationsRepliesResponse,
    ConversationsSetPurposeResponse,
    ConversationsSetTopicResponse,
    ConversationsUnarchiveResponse,
)
from .users import (
    UsersConversationsResponse,
    UsersGetPresenceResponse,
    UsersInfoResponse,
    UsersListResponse,
    UsersLookupByEmailResponse,
)
from .files import (
    FileResponse,
    FilesDeleteResponse,
    FilesInfoResponse,
    FilesListResponse,
    FilesRevokePublicURLResponse,
    FilesSharedPublicURLResponse,
    FilesUploadResponse,
)
from .views import (
    ViewResponse,
    ViewsOpenResponse,
    ViewsPublishResponse,
    ViewsPushResponse,
    ViewsUpdateResponse,
)
from .reactions import (
    PinsAddResponse,
    PinsListResponse,
    PinsRemoveResponse,
    ReactionsAddResponse,
    ReactionsGetResponse,
    ReactionsListResponse,
    ReactionsRemoveResponse,
)
from .team import (
    BotsInfoResponse,
    EmojiListResponse,
    TeamInfoResponse,
    UsergroupsListResponse,
)

__all__ = [
    "ApiTestResponse",
    "AuthRevokeResponse",
    "AuthTestResponse",
    "BotsInfoResponse",
    "ChatDeleteResponse",
    "ChatDeleteScheduledMessageResponse",
    "ChatGetPermalinkResponse",
    "ChatMeMessageResponse",
    "ChatPostEphemeralResponse",
    "ChatPostMessageResponse",
    "ChatScheduleMessageResponse",
    "ChatUpdateResponse",
    "ConversationResponse",
    "ConversationsArchiveResponse",
    "ConversationsCloseResponse",
    "ConversationsCreateResponse",
    "ConversationsHistoryResponse",
    "ConversationsInfoResponse",
    "ConversationsInviteResponse",
    "ConversationsJoinResponse",
    "ConversationsKickResponse",
    "ConversationsLeaveResponse",
    "ConversationsListResponse",
    "ConversationsMembersResponse",
    "ConversationsOpenResponse",
    "ConversationsRenameResponse",
    "ConversationsRepliesResponse",
    "ConversationsSetPurposeResponse",
    "ConversationsSetTopicResponse",
    "ConversationsUnarchiveResponse",
    "EmojiListResponse",
    "FileResponse",
    "FilesDeleteResponse",
    "FilesInfoResponse",
    "FilesListResponse",
    "FilesRevokePublicURLResponse",
    "FilesSharedPublicURLResponse",
    "FilesUploadResponse",
    "PinsAddResponse",
    "PinsListResponse",
    "PinsRemoveResponse",
    "ReactionsAddResponse",
    "ReactionsGetResponse",
    "ReactionsListResponse",
    "ReactionsRemoveResponse",
    "ResponseMetadata",
    "SlackApiResponse",
    "TeamInfoResponse",
    "UsergroupsListResponse",
    "UsersConversationsResponse",
    "UsersGetPresenceResponse",
    "UsersInfoResponse",
    "UsersListResponse",
    "UsersLookupByEmailResponse",
    "ViewResponse",
    "ViewsOpenResponse",
    "ViewsPublishResponse",
    "ViewsPushResponse",
    "ViewsUpdateResponse",
]
