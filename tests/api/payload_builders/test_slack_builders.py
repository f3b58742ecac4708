"""Testes dos builders de payload do Slack."""

from __future__ import annotations

import pytest

from api.payload_builders.slack import (
    build_message_payload,
    build_options_payload,
    build_view_response,
    plain_text_option,
)


class TestBuildMessagePayload:
    def test_text_only(self) -> None:
        assert build_message_payload("oi") == {"text": "oi"}

    def test_omits_unset_fields(self) -> None:
        payload = build_message_payload(
            "oi",
            blocks=[{"type": "divider"}],
            response_type="in_channel",
            replace_original=False,
        )

        assert payload == {
            "text": "oi",
            "blocks": [{"type": "divider"}],
            "response_type": "in_channel",
            "replace_original": False,
        }

    def test_requires_content(self) -> None:
        with pytest.raises(ValueError):
            build_message_payload()

    def test_delete_original_without_content(self) -> None:
        assert build_message_payload(delete_original=True) == {"delete_original": True}

    def test_invalid_response_type(self) -> None:
        with pytest.raises(ValueError, match="response_type"):
            build_message_payload("oi", response_type="broadcast")  # type: ignore[arg-type]


class TestBuildOptionsPayload:
    def test_options(self) -> None:
        options = [plain_text_option("Azul", "blue")]

        assert build_options_payload(options) == {
            "options": [{"text": {"type": "plain_text", "text": "Azul"}, "value": "blue"}]
        }

    def test_empty_options(self) -> None:
        assert build_options_payload() == {"options": []}

    def test_option_groups(self) -> None:
        groups = [{"label": {"type": "plain_text", "text": "Cores"}, "options": []}]

        assert build_options_payload(option_groups=groups) == {"option_groups": groups}

    def test_rejects_both(self) -> None:
        with pytest.raises(ValueError):
            build_options_payload([], [])


class TestBuildViewResponse:
    def test_errors(self) -> None:
        assert build_view_response("errors", errors={"email": "inválido"}) == {
            "response_action": "errors",
            "errors": {"email": "inválido"},
        }

    def test_errors_requires_messages(self) -> None:
        with pytest.raises(ValueError):
            build_view_response("errors")

    @pytest.mark.parametrize("action", ["update", "push"])
    def test_update_and_push_require_view(self, action: str) -> None:
        view = {"type": "modal", "title": {"type": "plain_text", "text": "Ok"}, "blocks": []}

        assert build_view_response(action, view=view) == {  # type: ignore[arg-type]
            "response_action": action,
            "view": view,
        }
        with pytest.raises(ValueError):
            build_view_response(action)  # type: ignore[arg-type]

    def test_clear(self) -> None:
        assert build_view_response("clear") == {"response_action": "clear"}

    def test_invalid_action(self) -> None:
        with pytest.raises(ValueError):
            build_view_response("close")  # type: ignore[arg-type]
