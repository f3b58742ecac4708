"""Resposta HTTP produzida pelo App (independente de framework web)."""

from __future__ import annotations

import json as jsonlib
from dataclasses import dataclass, field
from typing import Any

JSON_CONTENT_TYPE = "application/json; charset=utf-8"
TEXT_CONTENT_TYPE = "text/plain; charset=utf-8"


@dataclass
class Response:
    status_code: int = 200
    content_type: str | None = None
    body: str = ""
    headers: dict[str, str] = field(default_factory=dict)

    @classmethod
    def ok(cls) -> Response:
        return cls(status_code=200)

    @classmethod
    def json(cls, status_code: int, data: dict[str, Any]) -> Response:
        return cls(
            status_code=status_code,
            content_type=JSON_CONTENT_TYPE,
            body=jsonlib.dumps(data, separators=(",", ":")),
        )

    @classmethod
    def text(cls, status_code: int, text: str) -> Response:
        return cls(status_code=status_code, content_type=TEXT_CONTENT_TYPE, body=text)

    @classmethod
    def error(cls, status_code: int, message: str) -> Response:
        return cls.json(status_code, {"error": message})

    def json_body(self) -> Any:
        return jsonlib.loads(self.body) if self.body else None
