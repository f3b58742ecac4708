"""Testes das settings carregadas do ambiente."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from config.settings import SLACK_API_URL, SlackSettings, get_base_settings, get_slack_settings
from config.settings.base.core import _load_base_from_env
from config.settings.slack import _load_from_env


@pytest.fixture(autouse=True)
def _clear_caches() -> Iterator[None]:
    get_slack_settings.cache_clear()
    get_base_settings.cache_clear()
    yield
    get_slack_settings.cache_clear()
    get_base_settings.cache_clear()


def test_slack_settings_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("SLACK_SIGNING_SECRET", "SLACK_BOT_TOKEN", "SLACK_API_URL", "SLACK_EVENTS_PATH"):
        monkeypatch.delenv(name, raising=False)

    settings = _load_from_env()

    assert settings.api_url == SLACK_API_URL
    assert settings.events_path == "/slack/events"
    assert settings.signature_tolerance_seconds == 300
    assert settings.request_verification_enabled is True
    assert "SLACK_SIGNING_SECRET não configurado" in settings.validate()


def test_slack_settings_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SLACK_SIGNING_SECRET", "s3cr3t")
    monkeypatch.setenv("SLACK_BOT_TOKEN", "xoxb-1")
    monkeypatch.setenv("SLACK_MAX_RETRIES", "5")
    monkeypatch.setenv("SLACK_SSL_CHECK_ENABLED", "false")
    monkeypatch.setenv("SLACK_IGNORING_SELF_EVENTS_ENABLED", "")

    settings = get_slack_settings()

    assert settings.signing_secret == "s3cr3t"
    assert settings.bot_token == "xoxb-1"
    assert settings.max_retries == 5
    assert settings.ssl_check_enabled is False
    assert settings.ignoring_self_events_enabled is True
    assert settings.validate() == []
    assert get_slack_settings() is settings


def test_slack_settings_validation_errors() -> None:
    settings = SlackSettings(
        signing_secret="s",
        bot_token="abc",
        api_url="https://slack.test/api",
        request_timeout_seconds=0,
        max_retries=-1,
        signature_tolerance_seconds=0,
        events_path="slack",
    )

    errors = settings.validate()

    assert len(errors) == 6


def test_verification_disabled_does_not_require_secret() -> None:
    assert SlackSettings(request_verification_enabled=False).validate() == []


def test_get_method_url() -> None:
    assert SlackSettings().get_method_url("chat.postMessage") == (
        "https://slack.com/api/chat.postMessage"
    )
    with pytest.raises(ValueError):
        SlackSettings().get_method_url("")


def test_base_settings_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ENVIRONMENT", "production")
    monkeypatch.setenv("SERVICE_NAME", "meu-bot")

    settings = _load_base_from_env()

    assert settings.environment == "production"
    assert settings.is_production is True
    assert settings.is_strict is True
    assert settings.service_name == "meu-bot"
