from __future__ import annotations

from typing import Final

DEFAULT_BASE_URL: Final[str] = "https://api.twelvelabs.io/v1.2"
DEFAULT_TIMEOUT: Final[float] = 60.0
DEFAULT_POLL_INTERVAL: Final[float] = 5.0

API_KEY_HEADER: Final[str] = "x-api-key"
USER_AGENT: Final[str] = "tlvideo-python"

TASK_STATUS_VALIDATING: Final[str] = "validating"
TASK_STATUS_PENDING: Final[str] = "pending"
TASK_STATUS_QUEUED: Final[str] = "queued"
TASK_STATUS_INDEXING: Final[str] = "indexing"
TASK_STATUS_READY: Final[str] = "ready"
TASK_STATUS_FAILED: Final[str] = "failed"

TASK_DONE_STATUSES: Final[frozenset[str]] = frozenset({TASK_STATUS_READY, TASK_STATUS_FAILED})

INDEXES_PATH: Final[str] = "/indexes"
TASKS_PATH: Final[str] = "/tasks"
SEARCH_PATH: Final[str] = "/search"
ENGINES_PATH: Final[str] = "/engines"
GENERATE_PATH: Final[str] = "/generate"
GIST_PATH: Final[str] = "/gist"
SUMMARIZE_PATH: Final[str] = "/summarize"
