"""Async Python client for a video understanding API."""

from tlvideo.client import TLVideo
from tlvideo.config import Settings
from tlvideo.errors import (
    APIConnectionError,
    APIStatusError,
    AuthenticationError,
    BadRequestError,
    ConflictError,
    InternalServerError,
    InvalidResponseError,
    NotFoundError,
    PermissionDeniedError,
    PollTimeoutError,
    RateLimitError,
    TLVideoError,
    UnprocessableEntityError,
    map_http_error,
)
from tlvideo.models.schemas import (
    Clip,
    Confidence,
    EngineOption,
    EngineSelection,
    GistType,
    Index,
    SearchQuery,
    SearchResultPage,
    SummarizeType,
    Task,
    VideoClipGroup,
)
from tlvideo.services.pagination import SearchCursor
from tlvideo.services.poller import TaskPoller

__version__ = "0.1.0"

__all__ = [
    "TLVideo",
    "Settings",
    "SearchCursor",
    "TaskPoller",
    "Clip",
    "Confidence",
    "EngineOption",
    "EngineSelection",
    "GistType",
    "Index",
    "SearchQuery",
    "SearchResultPage",
    "SummarizeType",
    "Task",
    "VideoClipGroup",
    "TLVideoError",
    "APIStatusError",
    "APIConnectionError",
    "PollTimeoutError",
    "BadRequestError",
    "AuthenticationError",
    "PermissionDeniedError",
    "NotFoundError",
    "ConflictError",
    "UnprocessableEntityError",
    "RateLimitError",
    "InternalServerError",
    "InvalidResponseError",
    "map_http_error",
]
