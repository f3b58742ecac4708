import re

import pytest

from app.bolt import IdMatcher, TextMatcher


def test_string_id_matches_only_exact_value() -> None:
    matcher = IdMatcher.of("open.modal")

    assert matcher.matches("open.modal") is True
    assert matcher.matches("openXmodal") is False
    assert matcher.matches("open.modal-2") is False
    assert matcher.matches(None) is False


def test_pattern_must_match_whole_id() -> None:
    matcher = IdMatcher.of(re.compile(r"approve-\d+"))

    assert matcher.matches("approve-42") is True
    assert matcher.matches("approve-42-extra") is False
    assert matcher.matches("x-approve-42") is False


def test_empty_id_is_rejected() -> None:
    with pytest.raises(ValueError):
        IdMatcher.of("")


def test_text_matcher_searches_anywhere() -> None:
    matcher = TextMatcher.of(r"\bdeploy (\w+)")

    match = matcher.matches("por favor deploy api agora")

    assert match is not None
    assert match.group(1) == "api"
    assert matcher.matches("nada aqui") is None
    assert matcher.matches(None) is None
