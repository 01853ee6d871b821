from __future__ import annotations

import logging
import os
from contextlib import ExitStack
from pathlib import Path
from typing import Any, BinaryIO, Union

from tlvideo.constants import DEFAULT_POLL_INTERVAL, TASKS_PATH
from tlvideo.models.schemas import Task
from tlvideo.resources.base import Resource
from tlvideo.services.poller import ProgressCallback, TaskPoller
from tlvideo.services.transport import HTTPTransport
from tlvideo.utils import drop_none, require

logger = logging.getLogger(__name__)

VideoFile = Union[str, Path, bytes, BinaryIO]


class TaskResource(Resource):
    def __init__(self, transport: HTTPTransport, poll_interval: float = DEFAULT_POLL_INTERVAL) -> None:
        super().__init__(transport)
        self._poll_interval = poll_interval

    async def create(
        self,
        index_id: str,
        file: VideoFile | None = None,
        url: str | None = None,
        language: str | None = None,
    ) -> str:
        """Upload a video (local file or URL) for indexing and return the task id."""
        require(index_id, "index_id")
        if (file is None) == (url is None):
            raise ValueError("exactly one of file or url is required")

        data = drop_none({"index_id": index_id, "language": language, "video_url": url})
        with ExitStack() as stack:
            files = None
            if file is not None:
                files = {"video_file": _open_video(file, stack)}
            task_id = await self._request_id("POST", TASKS_PATH, data=data, files=files)

        logger.info("Created task %s for index %s", task_id, index_id)
        return task_id

    async def retrieve(self, task_id: str) -> Task:
        require(task_id, "task_id")
        return await self._request_model(Task, "GET", f"{TASKS_PATH}/{task_id}")

    async def list(
        self,
        index_id: str | None = None,
        status: str | None = None,
        page: int | None = None,
        page_limit: int | None = None,
        **filters: Any,
    ) -> list[Task]:
        params = drop_none(
            {
                "index_id": index_id,
                "status": status,
                "page": page,
                "page_limit": page_limit,
                **filters,
            }
        )
        return await self._request_page(Task, "GET", TASKS_PATH, params=params)

    async def delete(self, task_id: str) -> None:
        require(task_id, "task_id")
        await self._request("DELETE", f"{TASKS_PATH}/{task_id}")
        logger.info("Deleted task %s", task_id)

    async def wait_for_done(
        self,
        task_id: str,
        interval: float | None = None,
        callback: ProgressCallback | None = None,
        max_wait: float | None = None,
        max_attempts: int | None = None,
    ) -> Task:
        """Block until the task is ``ready`` or ``failed`` and return it.

        A ``failed`` task is returned, not raised; check ``task.status``.
        Polling uses a fixed interval with no backoff. Raises
        ``PollTimeoutError`` when ``max_wait`` or ``max_attempts`` runs out.
        """
        require(task_id, "task_id")
        poller = TaskPoller(
            self.retrieve,
            task_id,
            interval=self._poll_interval if interval is None else interval,
            callback=callback,
            max_wait=max_wait,
            max_attempts=max_attempts,
        )
        return await poller.run()


def _open_video(file: VideoFile, stack: ExitStack) -> tuple[str, Any]:
    if isinstance(file, (str, Path)):
        path = Path(file)
        return path.name, stack.enter_context(open(path, "rb"))
    if isinstance(file, bytes):
        return "video", file
    name = getattr(file, "name", None)
    filename = os.path.basename(name) if isinstance(name, str) else "video"
    return filename, file
