"""Cliente HTTP base (httpx assíncrono) com retry e backoff."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Any

import httpx

logger = logging.getLogger(__name__)

RETRYABLE_STATUS = 429


@dataclass
class HttpClientConfig:
    """Configuração do cliente HTTP."""

    timeout_seconds: float = 30.0
    max_retries: int = 3
    backoff_base_seconds: float = 1.0
    backoff_max_seconds: float = 30.0
    default_headers: dict[str, str] = field(default_factory=dict)
    verify_ssl: bool = True
    transport: httpx.AsyncBaseTransport | None = None


class HttpError(Exception):
    """Erro de requisição HTTP sem dados sensíveis."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        is_retryable: bool = False,
        retry_after_seconds: float | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.is_retryable = is_retryable
        self.retry_after_seconds = retry_after_seconds


class HttpClient:
    """Cliente HTTP simples para chamadas externas.

    Retenta 429 (respeitando Retry-After), 5xx, timeouts e falhas de conexão.
    Demais status são devolvidos ao chamador.
    """

    def __init__(self, config: HttpClientConfig | None = None) -> None:
        self._config = config or HttpClientConfig()

    async def post_form(
        self,
        url: str,
        data: dict[str, str],
        headers: dict[str, str] | None = None,
        files: dict[str, Any] | None = None,
    ) -> httpx.Response:
        return await self._post(url, headers, data=data, files=files)

    async def post_json(
        self,
        url: str,
        json: dict[str, Any],
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        return await self._post(url, headers, json=json)

    async def _post(
        self,
        url: str,
        headers: dict[str, str] | None,
        **request_kwargs: Any,
    ) -> httpx.Response:
        merged_headers = {**self._config.default_headers, **(headers or {})}
        for attempt in range(self._config.max_retries + 1):
            try:
                async with httpx.AsyncClient(
                    verify=self._config.verify_ssl,
                    transport=self._config.transport,
                ) as client:
                    response = await client.post(
                        url,
                        headers=merged_headers,
                        timeout=self._config.timeout_seconds,
                        **request_kwargs,
                    )
                if response.status_code == RETRYABLE_STATUS:
                    raise HttpError(
                        "http_rate_limited",
                        status_code=response.status_code,
                        is_retryable=True,
                        retry_after_seconds=_parse_retry_after(response),
                    )
                if response.status_code >= 500:
                    raise HttpError(
                        "http_retryable_status",
                        status_code=response.status_code,
                        is_retryable=True,
                    )
                return response
            except HttpError as exc:
                if not exc.is_retryable or attempt >= self._config.max_retries:
                    raise
                await _backoff_sleep(
                    attempt,
                    self._config.backoff_base_seconds,
                    self._config.backoff_max_seconds,
                    retry_after=exc.retry_after_seconds,
                )
            except (httpx.TimeoutException, httpx.ConnectError) as exc:
                if attempt >= self._config.max_retries:
                    raise HttpError("http_connection_error", is_retryable=True) from exc
                await _backoff_sleep(
                    attempt,
                    self._config.backoff_base_seconds,
                    self._config.backoff_max_seconds,
                )
        raise HttpError("http_retry_exhausted", is_retryable=True)


def _parse_retry_after(response: httpx.Response) -> float | None:
    raw = response.headers.get("retry-after")
    if raw is None:
        return None
    try:
        return max(float(raw), 0.0)
    except ValueError:
        return None


async def _backoff_sleep(
    attempt: int,
    base: float,
    max_seconds: float,
    retry_after: float | None = None,
) -> None:
    if retry_after is not None:
        backoff = retry_after
    else:
        backoff = min((2**attempt) * base, max_seconds)
    logger.info(
        "http_backoff",
        extra={"backoff_seconds": backoff, "attempt": attempt + 1},
    )
    await asyncio.sleep(backoff)
