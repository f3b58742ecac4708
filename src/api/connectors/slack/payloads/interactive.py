"""Payloads de interatividade (campo `payload` do form-urlencoded).

Cobre Block Kit (block_actions, block_suggestion), shortcuts, modais
(view_submission, view_closed), dialogs legados e attachments interativos.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from api.connectors.slack.models import Message, View


class UnknownPayloadTypeError(ValueError):
    """`type` do payload não reconhecido."""


class _Payload(BaseModel):
    model_config = ConfigDict(extra="ignore")


class TeamRef(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: str | None = None
    domain: str | None = None
    enterprise_id: str | None = None


class UserRef(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: str | None = None
    username: str | None = None
    name: str | None = None
    team_id: str | None = None


class ChannelRef(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: str | None = None
    name: str | None = None


class EnterpriseRef(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: str | None = None
    name: str | None = None


class Action(BaseModel):
    """Ação de block_actions ou interactive_message."""

    model_config = ConfigDict(extra="allow")

    type: str | None = None
    action_id: str | None = None
    block_id: str | None = None
    name: str | None = None
    value: str | None = None
    action_ts: str | None = None
    selected_option: dict[str, Any] | None = None
    selected_options: list[dict[str, Any]] = Field(default_factory=list)
    selected_user: str | None = None
    selected_channel: str | None = None
    selected_conversation: str | None = None
    selected_date: str | None = None


class BlockActionsPayload(_Payload):
    type: str = "block_actions"
    token: str | None = None
    api_app_id: str | None = None
    team: TeamRef | None = None
    user: UserRef | None = None
    enterprise: EnterpriseRef | None = None
    container: dict[str, Any] | None = None
    trigger_id: str | None = None
    channel: ChannelRef | None = None
    message: Message | None = None
    view: View | None = None
    state: dict[str, Any] | None = None
    response_url: str | None = None
    actions: list[Action] = Field(default_factory=list)
    is_enterprise_install: bool | None = None

    @property
    def action_id(self) -> str | None:
        """action_id usado no roteamento (primeira ação)."""
        return self.actions[0].action_id if self.actions else None


class BlockSuggestionPayload(_Payload):
    type: str = "block_suggestion"
    token: str | None = None
    api_app_id: str | None = None
    team: TeamRef | None = None
    user: UserRef | None = None
    enterprise: EnterpriseRef | None = None
    container: dict[str, Any] | None = None
    channel: ChannelRef | None = None
    view: View | None = None
    action_id: str
    block_id: str | None = None
    value: str = ""


class GlobalShortcutPayload(_Payload):
    type: str = "shortcut"
    token: str | None = None
    action_ts: str | None = None
    team: TeamRef | None = None
    user: UserRef | None = None
    enterprise: EnterpriseRef | None = None
    callback_id: str
    trigger_id: str | None = None
    is_enterprise_install: bool | None = None


class MessageShortcutPayload(_Payload):
    type: str = "message_action"
    token: str | None = None
    action_ts: str | None = None
    team: TeamRef | None = None
    user: UserRef | None = None
    enterprise: EnterpriseRef | None = None
    channel: ChannelRef | None = None
    callback_id: str
    trigger_id: str | None = None
    message_ts: str | None = None
    message: Message | None = None
    response_url: str | None = None
    is_enterprise_install: bool | None = None


class ViewSubmissionPayload(_Payload):
    type: str = "view_submission"
    token: str | None = None
    api_app_id: str | None = None
    team: TeamRef | None = None
    user: UserRef | None = None
    enterprise: EnterpriseRef | None = None
    view: View
    trigger_id: str | None = None
    response_urls: list[dict[str, Any]] = Field(default_factory=list)
    is_enterprise_install: bool | None = None

    @property
    def callback_id(self) -> str | None:
        return self.view.callback_id


class ViewClosedPayload(_Payload):
    type: str = "view_closed"
    token: str | None = None
    api_app_id: str | None = None
    team: TeamRef | None = None
    user: UserRef | None = None
    enterprise: EnterpriseRef | None = None
    view: View
    is_cleared: bool = False

    @property
    def callback_id(self) -> str | None:
        return self.view.callback_id


class _DialogPayload(_Payload):
    token: str | None = None
    action_ts: str | None = None
    team: TeamRef | None = None
    user: UserRef | None = None
    channel: ChannelRef | None = None
    callback_id: str
    state: str | None = None
    response_url: str | None = None


class DialogSubmissionPayload(_DialogPayload):
    type: str = "dialog_submission"
    submission: dict[str, Any] = Field(default_factory=dict)


class DialogCancellationPayload(_DialogPayload):
    type: str = "dialog_cancellation"


class DialogSuggestionPayload(_DialogPayload):
    type: str = "dialog_suggestion"
    name: str | None = None
    value: str = ""


class AttachmentActionPayload(_Payload):
    """Botões/menus de attachments legados (`interactive_message`)."""

    type: str = "interactive_message"
    token: str | None = None
    callback_id: str
    actions: list[Action] = Field(default_factory=list)
    team: TeamRef | None = None
    user: UserRef | None = None
    channel: ChannelRef | None = None
    action_ts: str | None = None
    message_ts: str | None = None
    attachment_id: str | None = None
    original_message: Message | None = None
    response_url: str | None = None
    trigger_id: str | None = None


InteractivePayload = (
    BlockActionsPayload
    | BlockSuggestionPayload
    | GlobalShortcutPayload
    | MessageShortcutPayload
    | ViewSubmissionPayload
    | ViewClosedPayload
    | DialogSubmissionPayload
    | DialogCancellationPayload
    | DialogSuggestionPayload
    | AttachmentActionPayload
)

PAYLOAD_TYPES: dict[str, type[BaseModel]] = {
    "block_actions": BlockActionsPayload,
    "block_suggestion": BlockSuggestionPayload,
    "shortcut": GlobalShortcutPayload,
    "message_action": MessageShortcutPayload,
    "view_submission": ViewSubmissionPayload,
    "view_closed": ViewClosedPayload,
    "dialog_submission": DialogSubmissionPayload,
    "dialog_cancellation": DialogCancellationPayload,
    "dialog_suggestion": DialogSuggestionPayload,
    "interactive_message": AttachmentActionPayload,
}


def parse_interactive_payload(data: dict[str, Any]) -> InteractivePayload:
    """Converte o JSON do campo `payload` no modelo do seu `type`.

    Raises:
        UnknownPayloadTypeError: Tipo não suportado
        pydantic.ValidationError: Estrutura inválida
    """
    payload_type = data.get("type")
    model = PAYLOAD_TYPES.get(str(payload_type))
    if model is None:
        raise UnknownPayloadTypeError(str(payload_type))
    return model.model_validate(data)  # type: ignore[return-value]
