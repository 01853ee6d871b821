from __future__ import annotations

from typing import Any

import httpx
import pytest

from tlvideo import TLVideo

BASE_URL = "https://api.test/v1.2"
API_KEY = "tlk_test_key"


class ScriptedAPI:
    """httpx handler that replays scripted responses per (method, path).

    The last scripted entry for a route keeps being returned once the earlier
    ones are used up. An exception instance is raised instead of answered.
    """

    def __init__(self) -> None:
        self.routes: dict[tuple[str, str], list[Any]] = {}
        self.requests: list[httpx.Request] = []

    def add(self, method: str, path: str, *replies: Any) -> None:
        self.routes.setdefault((method, path), []).extend(replies)

    def calls(self, method: str, path: str) -> int:
        return sum(
            1
            for request in self.requests
            if request.method == method and _route_path(request) == path
        )

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        key = (request.method, _route_path(request))
        replies = self.routes.get(key)
        if not replies:
            raise AssertionError(f"Unexpected request: {key}")
        reply = replies.pop(0) if len(replies) > 1 else replies[0]
        if isinstance(reply, Exception):
            raise reply
        status, body = reply
        return httpx.Response(status, json=body)


def _route_path(request: httpx.Request) -> str:
    return request.url.path.removeprefix("/v1.2")


@pytest.fixture
def api() -> ScriptedAPI:
    return ScriptedAPI()


@pytest.fixture
def client(api: ScriptedAPI) -> TLVideo:
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(api.handler))
    return TLVideo(api_key=API_KEY, base_url=BASE_URL, poll_interval=0, http_client=http_client)
