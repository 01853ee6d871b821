from __future__ import annotations

import logging
from typing import Any, Sequence
from urllib.parse import quote

from tlvideo.constants import SEARCH_PATH
from tlvideo.models.schemas import (
    ConversationOption,
    EngineOption,
    GroupBy,
    Operator,
    SearchQuery,
    SearchResultPage,
    SortOption,
    Threshold,
)
from tlvideo.resources.base import Resource
from tlvideo.services.pagination import SearchCursor
from tlvideo.utils import require

logger = logging.getLogger(__name__)


class SearchResource(Resource):
    async def query(
        self,
        index_id: str | SearchQuery,
        query: str | dict[str, Any] | None = None,
        options: Sequence[EngineOption | str] | None = None,
        *,
        group_by: GroupBy | str | None = None,
        threshold: Threshold | str | None = None,
        operator: Operator | str | None = None,
        conversation_option: ConversationOption | str | None = None,
        filter: dict[str, Any] | None = None,
        page_limit: int | None = None,
        sort_option: SortOption | str | None = None,
    ) -> SearchCursor:
        """Run a search and return a cursor positioned on the first page.

        Either pass the fields directly or a prepared ``SearchQuery`` as the
        only argument.
        """
        if isinstance(index_id, SearchQuery):
            return await self.execute(index_id)
        search_query = SearchQuery(
            index_id=index_id,
            query=query,
            options=list(options) if options is not None else None,
            group_by=group_by,
            threshold=threshold,
            operator=operator,
            conversation_option=conversation_option,
            filter=filter,
            page_limit=page_limit,
            sort_option=sort_option,
        )
        return await self.execute(search_query)

    async def execute(self, search_query: SearchQuery) -> SearchCursor:
        first_page = await self._request_model(
            SearchResultPage, "POST", SEARCH_PATH, json=search_query.to_body()
        )
        logger.debug(
            "Search on index %s returned %d record(s), total %s",
            search_query.index_id,
            len(first_page.data),
            first_page.page_info.total_results,
        )
        return SearchCursor(first_page, self.by_page_token)

    async def by_page_token(self, page_token: str) -> SearchResultPage:
        require(page_token, "page_token")
        return await self._request_model(
            SearchResultPage, "GET", f"{SEARCH_PATH}/{quote(page_token, safe='')}"
        )
