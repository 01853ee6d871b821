from __future__ import annotations

import logging
from typing import Any, Mapping, Sequence

from tlvideo.constants import INDEXES_PATH
from tlvideo.models.schemas import EngineSelection, Index, IndexEngine, Video
from tlvideo.resources.base import Resource
from tlvideo.utils import drop_none, require

logger = logging.getLogger(__name__)


class IndexResource(Resource):
    async def create(
        self,
        name: str,
        engines: Sequence[EngineSelection | Mapping[str, Any]],
        addons: Sequence[str] | None = None,
    ) -> Index:
        require(name, "name")
        if not engines:
            raise ValueError("engines is required")
        selections = [
            engine if isinstance(engine, EngineSelection) else EngineSelection.model_validate(engine)
            for engine in engines
        ]
        payload = {
            "index_name": name,
            "engines": [selection.model_dump(mode="json") for selection in selections],
        }
        if addons:
            payload["addons"] = list(addons)

        index_id = await self._request_id("POST", INDEXES_PATH, json=payload)
        logger.info("Created index %s (%s)", index_id, name)
        return Index(
            id=index_id,
            name=name,
            engines=[IndexEngine.model_validate(entry) for entry in payload["engines"]],
        )

    async def retrieve(self, index_id: str) -> Index:
        require(index_id, "index_id")
        return await self._request_model(Index, "GET", f"{INDEXES_PATH}/{index_id}")

    async def list(
        self,
        page: int | None = None,
        page_limit: int | None = None,
        **filters: Any,
    ) -> list[Index]:
        params = drop_none({"page": page, "page_limit": page_limit, **filters})
        return await self._request_page(Index, "GET", INDEXES_PATH, params=params)

    async def delete(self, index_id: str) -> None:
        require(index_id, "index_id")
        await self._request("DELETE", f"{INDEXES_PATH}/{index_id}")
        logger.info("Deleted index %s", index_id)

    async def list_videos(
        self,
        index_id: str,
        page: int | None = None,
        page_limit: int | None = None,
        **filters: Any,
    ) -> list[Video]:
        require(index_id, "index_id")
        params = drop_none({"page": page, "page_limit": page_limit, **filters})
        return await self._request_page(Video, "GET", f"{INDEXES_PATH}/{index_id}/videos", params=params)

    async def retrieve_video(self, index_id: str, video_id: str) -> Video:
        require(index_id, "index_id")
        require(video_id, "video_id")
        return await self._request_model(Video, "GET", f"{INDEXES_PATH}/{index_id}/videos/{video_id}")

    async def delete_video(self, index_id: str, video_id: str) -> None:
        require(index_id, "index_id")
        require(video_id, "video_id")
        await self._request("DELETE", f"{INDEXES_PATH}/{index_id}/videos/{video_id}")
        logger.info("Deleted video %s from index %s", video_id, index_id)
