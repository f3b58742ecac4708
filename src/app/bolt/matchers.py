"""Comparação de ids (callback_id, action_id, comando) e textos."""

from __future__ import annotations

import re
from dataclasses import dataclass

Matchable = str | re.Pattern[str]


@dataclass(frozen=True)
class IdMatcher:
    """String casa apenas com o id exato; Pattern precisa casar o id inteiro."""

    pattern: re.Pattern[str]

    @classmethod
    def of(cls, value: Matchable) -> IdMatcher:
        if isinstance(value, re.Pattern):
            return cls(value)
        if not value:
            raise ValueError("id vazio não pode ser registrado")
        return cls(re.compile(re.escape(value)))

    def matches(self, value: str | None) -> bool:
        if value is None:
            return False
        return self.pattern.fullmatch(value) is not None


@dataclass(frozen=True)
class TextMatcher:
    """Busca o padrão em qualquer posição do texto da mensagem."""

    pattern: re.Pattern[str]

    @classmethod
    def of(cls, value: Matchable) -> TextMatcher:
        if isinstance(value, re.Pattern):
            return cls(value)
        return cls(re.compile(value))

    def matches(self, text: str | None) -> re.Match[str] | None:
        if text is None:
            return None
        return self.pattern.search(text)
