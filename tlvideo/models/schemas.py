from __future__ import annotations

import logging
from datetime import datetime
from enum import Enum
from typing import Annotated, Any, Union

from pydantic import AfterValidator, BaseModel, BeforeValidator, ConfigDict, Field, field_validator, model_validator

from tlvideo.constants import TASK_DONE_STATUSES, TASK_STATUS_READY

logger = logging.getLogger(__name__)


class EngineOption(str, Enum):
    VISUAL = "visual"
    CONVERSATION = "conversation"
    TEXT_IN_VIDEO = "text_in_video"
    LOGO = "logo"
    UNKNOWN = "unknown"


class Confidence(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"
    NONE = "none"
    UNKNOWN = "unknown"


class GroupBy(str, Enum):
    VIDEO = "video"
    CLIP = "clip"


class Threshold(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"
    NONE = "none"


class Operator(str, Enum):
    OR = "or"
    AND = "and"


class ConversationOption(str, Enum):
    SEMANTIC = "semantic"
    EXACT_MATCH = "exact_match"


class SortOption(str, Enum):
    SCORE = "score"
    CLIP_COUNT = "clip_count"


class GistType(str, Enum):
    TITLE = "title"
    TOPIC = "topic"
    HASHTAG = "hashtag"


class SummarizeType(str, Enum):
    SUMMARY = "summary"
    CHAPTER = "chapter"
    HIGHLIGHT = "highlight"


def _lenient(enum_cls: type[Enum]) -> BeforeValidator:
    def coerce(value: Any) -> Any:
        if isinstance(value, enum_cls):
            return value
        try:
            return enum_cls(value)
        except ValueError:
            logger.debug("Unrecognized %s value from server: %r", enum_cls.__name__, value)
            return enum_cls("unknown")

    return BeforeValidator(coerce)


def _known(value: EngineOption) -> EngineOption:
    if value is EngineOption.UNKNOWN:
        raise ValueError("'unknown' is not a valid engine option")
    return value


# Server values fall back to UNKNOWN; request values must be recognized.
ReceivedEngineOption = Annotated[EngineOption, _lenient(EngineOption)]
RequestedEngineOption = Annotated[EngineOption, AfterValidator(_known)]
ReceivedConfidence = Annotated[Confidence, _lenient(Confidence)]


class APIModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class Engine(APIModel):
    id: str = Field(alias="_id")
    engine_name: str
    allowed_engine_options: list[ReceivedEngineOption] = Field(default_factory=list)
    author: str | None = None
    model_type: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class IndexEngine(APIModel):
    engine_name: str
    engine_options: list[ReceivedEngineOption] = Field(default_factory=list)


class EngineSelection(BaseModel):
    model_config = ConfigDict(frozen=True)

    engine_name: str = Field(min_length=1)
    engine_options: list[RequestedEngineOption] = Field(min_length=1)


class Index(APIModel):
    id: str = Field(alias="_id")
    name: str | None = Field(default=None, alias="index_name")
    engines: list[IndexEngine] = Field(default_factory=list)
    video_count: int = 0
    total_duration: float = 0.0
    created_at: datetime | None = None
    updated_at: datetime | None = None
    expires_at: datetime | None = None


class VideoMetadata(BaseModel):
    model_config = ConfigDict(extra="allow")

    filename: str | None = None
    duration: float | None = None
    fps: float | None = None
    width: int | None = None
    height: int | None = None
    size: int | None = None


class Video(APIModel):
    id: str = Field(alias="_id")
    metadata: VideoMetadata = Field(default_factory=VideoMetadata)
    created_at: datetime | None = None
    updated_at: datetime | None = None
    indexed_at: datetime | None = None


class Task(APIModel):
    id: str = Field(alias="_id")
    index_id: str | None = None
    status: str
    video_id: str | None = None
    metadata: dict[str, Any] | None = None
    estimated_time: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @model_validator(mode="after")
    def _video_id_only_when_ready(self) -> "Task":
        if self.status == TASK_STATUS_READY:
            if not self.video_id:
                raise ValueError(f"task {self.id} is ready but has no video_id")
        elif self.video_id is not None:
            self.video_id = None
        return self

    @property
    def is_done(self) -> bool:
        return self.status in TASK_DONE_STATUSES


class Clip(APIModel):
    video_id: str
    score: float
    start: float
    end: float
    confidence: ReceivedConfidence = Confidence.UNKNOWN
    thumbnail_url: str | None = None
    metadata: list[dict[str, Any]] = Field(default_factory=list)


class VideoClipGroup(APIModel):
    id: str
    clips: list[Clip] = Field(default_factory=list)


SearchRecord = Union[Clip, VideoClipGroup]


class PageInfo(APIModel):
    limit_per_page: int | None = None
    total_results: int | None = None
    page_expired_at: datetime | None = None
    next_page_token: str | None = None

    @field_validator("next_page_token", mode="before")
    @classmethod
    def _blank_token_is_absent(cls, value: Any) -> Any:
        if value == "":
            return None
        return value


class SearchResultPage(APIModel):
    data: list[SearchRecord] = Field(default_factory=list)
    page_info: PageInfo = Field(default_factory=PageInfo)
    search_pool: dict[str, Any] | None = None


class SearchQuery(BaseModel):
    model_config = ConfigDict(frozen=True)

    index_id: str = Field(min_length=1)
    query: str | dict[str, Any]
    options: list[RequestedEngineOption] | None = Field(default=None, serialization_alias="search_options")
    group_by: GroupBy | None = None
    threshold: Threshold | None = None
    operator: Operator | None = None
    conversation_option: ConversationOption | None = None
    filter: dict[str, Any] | None = None
    page_limit: int | None = Field(default=None, ge=1)
    sort_option: SortOption | None = None

    def to_body(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class GenerateTextResult(APIModel):
    id: str
    data: str


class GistResult(APIModel):
    id: str
    title: str | None = None
    topics: list[str] = Field(default_factory=list)
    hashtags: list[str] = Field(default_factory=list)


class Chapter(APIModel):
    chapter_number: int
    start: float
    end: float
    chapter_title: str | None = None
    chapter_summary: str | None = None


class Highlight(APIModel):
    start: float
    end: float
    highlight: str | None = None
    highlight_summary: str | None = None


class SummarizeResult(APIModel):
    id: str
    summary: str | None = None
    chapters: list[Chapter] = Field(default_factory=list)
    highlights: list[Highlight] = Field(default_factory=list)
