from __future__ import annotations

import logging
from typing import AsyncIterator, Awaitable, Callable

from tlvideo.models.schemas import PageInfo, SearchRecord, SearchResultPage

logger = logging.getLogger(__name__)

PageFetcher = Callable[[str], Awaitable[SearchResultPage]]


class SearchCursor:
    """Forward-only view over a paginated search result.

    ``data`` and ``page_info`` describe the most recently fetched page. Each
    ``next()`` call moves one page forward and returns its records, or ``None``
    once the server stops handing out continuation tokens. The cursor cannot be
    rewound, and a single instance must not have ``next()`` awaited
    concurrently.
    """

    def __init__(self, first_page: SearchResultPage, fetch_page: PageFetcher) -> None:
        self._fetch_page = fetch_page
        self.data: list[SearchRecord] = first_page.data
        self.page_info: PageInfo = first_page.page_info
        self.search_pool = first_page.search_pool
        self._next_token: str | None = first_page.page_info.next_page_token
        self._pages_fetched = 1

    @property
    def exhausted(self) -> bool:
        return self._next_token is None

    @property
    def pages_fetched(self) -> int:
        return self._pages_fetched

    async def next(self) -> list[SearchRecord] | None:
        if self._next_token is None:
            return None

        page = await self._fetch_page(self._next_token)
        self._pages_fetched += 1
        self.data = page.data
        self.page_info = page.page_info
        self._next_token = page.page_info.next_page_token
        if self._next_token is None:
            logger.debug("Search exhausted after %d page(s)", self._pages_fetched)
        return page.data

    async def pages(self) -> AsyncIterator[list[SearchRecord]]:
        yield self.data
        while True:
            page = await self.next()
            if page is None:
                return
            yield page
