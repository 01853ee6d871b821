from __future__ import annotations

import logging

import httpx

from tlvideo.config import Settings
from tlvideo.resources.engines import EngineResource
from tlvideo.resources.generate import GenerateResource
from tlvideo.resources.indexes import IndexResource
from tlvideo.resources.search import SearchResource
from tlvideo.resources.tasks import TaskResource
from tlvideo.services.transport import HTTPTransport

logger = logging.getLogger(__name__)


class TLVideo:
    """Async client for the video understanding API.

    Explicit arguments win over ``settings``; when no settings object is
    given one is read from ``TLVIDEO_*`` environment variables::

        async with TLVideo(api_key="tlk_...") as client:
            task_id = await client.tasks.create(index_id, file="clip.mp4")
            task = await client.tasks.wait_for_done(task_id, callback=print)
    """

    def __init__(
        self,
        api_key: str | None = None,
        *,
        base_url: str | None = None,
        timeout: float | None = None,
        poll_interval: float | None = None,
        settings: Settings | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        settings = settings or Settings()
        api_key = api_key or settings.api_key
        if not api_key:
            raise ValueError("api_key is required (pass it or set TLVIDEO_API_KEY)")

        self._transport = HTTPTransport(
            api_key,
            base_url=base_url or settings.base_url,
            timeout=settings.timeout if timeout is None else timeout,
            client=http_client,
        )
        self.indexes = IndexResource(self._transport)
        self.tasks = TaskResource(
            self._transport,
            poll_interval=settings.poll_interval if poll_interval is None else poll_interval,
        )
        self.search = SearchResource(self._transport)
        self.generate = GenerateResource(self._transport)
        self.engines = EngineResource(self._transport)
        logger.debug("Client configured for %s", self._transport.base_url)

    async def aclose(self) -> None:
        await self._transport.aclose()

    async def __aenter__(self) -> "TLVideo":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()
