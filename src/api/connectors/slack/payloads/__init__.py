"""Payloads recebidos do Slack: Events API, slash commands e interatividade."""

from .events import (
    APP_RATE_LIMITED,
    EVENT_CALLBACK,
    URL_VERIFICATION,
    AppRateLimitedPayload,
    Authorization,
    EventBody,
    EventsApiPayload,
    UrlVerificationPayload,
    event_key,
    parse_events_api_payload,
)
from .interactive import (
    PAYLOAD_TYPES,
    Action,
    AttachmentActionPayload,
    BlockActionsPayload,
    BlockSuggestionPayload,
    ChannelRef,
    DialogCancellationPayload,
    DialogSubmissionPayload,
    DialogSuggestionPayload,
    EnterpriseRef,
    GlobalShortcutPayload,
    InteractivePayload,
    MessageShortcutPayload,
    TeamRef,
    UnknownPayloadTypeError,
    UserRef,
    ViewClosedPayload,
    ViewSubmissionPayload,
    parse_interactive_payload,
)
from .slash_command import SlashCommandPayload

__all__ = [
    "APP_RATE_LIMITED",
    "EVENT_CALLBACK",
    "PAYLOAD_TYPES",
    "URL_VERIFICATION",
    "Action",
    "AppRateLimitedPayload",
    "AttachmentActionPayload",
    "Authorization",
    "BlockActionsPayload",
    "BlockSuggestionPayload",
    "ChannelRef",
    "DialogCancellationPayload",
    "DialogSubmissionPayload",
    "DialogSuggestionPayload",
    "EnterpriseRef",
    "EventBody",
    "EventsApiPayload",
    "GlobalShortcutPayload",
    "InteractivePayload",
    "MessageShortcutPayload",
    "SlashCommandPayload",
    "TeamRef",
    "UnknownPayloadTypeError",
    "UrlVerificationPayload",
    "UserRef",
    "ViewClosedPayload",
    "ViewSubmissionPayload",
    "event_key",
    "parse_events_api_payload",
    "parse_interactive_payload",
]
