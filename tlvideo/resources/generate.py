from __future__ import annotations

from typing import Sequence

from tlvideo.constants import GENERATE_PATH, GIST_PATH, SUMMARIZE_PATH
from tlvideo.models.schemas import GenerateTextResult, GistResult, GistType, SummarizeResult, SummarizeType
from tlvideo.resources.base import Resource
from tlvideo.utils import drop_none, require


class GenerateResource(Resource):
    async def text(self, video_id: str, prompt: str) -> GenerateTextResult:
        require(video_id, "video_id")
        require(prompt, "prompt")
        return await self._request_model(
            GenerateTextResult, "POST", GENERATE_PATH, json={"video_id": video_id, "prompt": prompt}
        )

    async def gist(self, video_id: str, types: Sequence[GistType | str]) -> GistResult:
        require(video_id, "video_id")
        if not types:
            raise ValueError("types is required")
        payload = {"video_id": video_id, "types": [GistType(value).value for value in types]}
        return await self._request_model(GistResult, "POST", GIST_PATH, json=payload)

    async def summarize(
        self,
        video_id: str,
        type: SummarizeType | str,
        prompt: str | None = None,
    ) -> SummarizeResult:
        require(video_id, "video_id")
        require(type, "type")
        payload = drop_none(
            {"video_id": video_id, "type": SummarizeType(type).value, "prompt": prompt}
        )
        return await self._request_model(SummarizeResult, "POST", SUMMARIZE_PATH, json=payload)
