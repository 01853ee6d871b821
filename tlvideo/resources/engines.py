from __future__ import annotations

from tlvideo.constants import ENGINES_PATH
from tlvideo.models.schemas import Engine
from tlvideo.resources.base import Resource
from tlvideo.utils import drop_none, require


class EngineResource(Resource):
    async def list(self, page: int | None = None, page_limit: int | None = None) -> list[Engine]:
        return await self._request_page(
            Engine, "GET", ENGINES_PATH, params=drop_none({"page": page, "page_limit": page_limit})
        )

    async def retrieve(self, engine_id: str) -> Engine:
        require(engine_id, "engine_id")
        return await self._request_model(Engine, "GET", f"{ENGINES_PATH}/{engine_id}")
