from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

import httpx

from tlvideo.constants import API_KEY_HEADER, DEFAULT_BASE_URL, DEFAULT_TIMEOUT, USER_AGENT
from tlvideo.errors import APIConnectionError

logger = logging.getLogger(__name__)


@dataclass
class APIResponse:
    status_code: int
    body: Any

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300


class HTTPTransport:
    """Sends authenticated requests to the API and decodes the response body.

    HTTP error statuses are returned, not raised; only failures that never
    produced a response become ``APIConnectionError``.
    """

    def __init__(
        self,
        api_key: str,
        *,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        if not api_key:
            raise ValueError("api_key is required")
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._headers = {API_KEY_HEADER: api_key, "User-Agent": USER_AGENT}
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient()

    @property
    def base_url(self) -> str:
        return self._base_url

    async def request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        json: Any = None,
        data: dict[str, Any] | None = None,
        files: dict[str, Any] | None = None,
    ) -> APIResponse:
        url = f"{self._base_url}{path}"
        logger.debug("%s %s", method, path)
        try:
            response = await self._client.request(
                method,
                url,
                params=params,
                json=json,
                data=data,
                files=files,
                headers=self._headers,
                timeout=self._timeout,
            )
        except httpx.TransportError as exc:
            raise APIConnectionError(
                f"{method} {path} failed: {exc}", method=method, path=path
            ) from exc

        logger.debug("%s %s -> %d", method, path, response.status_code)
        return APIResponse(status_code=response.status_code, body=_decode(response))

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()


def _decode(response: httpx.Response) -> Any:
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text
