from __future__ import annotations

import asyncio
import inspect
import logging
import time
from typing import Any, Awaitable, Callable

from tlvideo.errors import PollTimeoutError, TLVideoError, is_transient
from tlvideo.models.schemas import Task

logger = logging.getLogger(__name__)

TaskFetcher = Callable[[str], Awaitable[Task]]
ProgressCallback = Callable[[Task], Any]


class TaskPoller:
    """Polls a task until it reaches a terminal status.

    The poller waits a fixed ``interval`` between fetches, including after a
    rate-limited or failed fetch; no exponential backoff is applied. Rate
    limits, 5xx responses and connection failures are retried while budget
    remains. Every other error propagates on first occurrence.

    ``max_attempts`` caps the number of fetches. ``max_wait`` caps elapsed
    time: another fetch is scheduled only if it would start before
    ``max_wait`` seconds. With neither set the poller waits indefinitely.
    Cancelling the surrounding asyncio task stops it without further fetches.
    """

    def __init__(
        self,
        fetch: TaskFetcher,
        task_id: str,
        *,
        interval: float,
        callback: ProgressCallback | None = None,
        max_wait: float | None = None,
        max_attempts: int | None = None,
        sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if interval < 0:
            raise ValueError("interval must be non-negative")
        if max_attempts is not None and max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        if max_wait is not None and max_wait < 0:
            raise ValueError("max_wait must be non-negative")

        self._fetch = fetch
        self.task_id = task_id
        self.interval = interval
        self.callback = callback
        self.max_wait = max_wait
        self.max_attempts = max_attempts
        self._sleep = sleep
        self._clock = clock
        self.attempts = 0

    async def run(self) -> Task:
        self.attempts = 0
        started = self._clock()
        last_task: Task | None = None

        while True:
            self.attempts += 1
            last_error: TLVideoError | None = None
            try:
                task = await self._fetch(self.task_id)
            except TLVideoError as exc:
                if not is_transient(exc):
                    raise
                logger.warning(
                    "Polling task %s failed on attempt %d: %s", self.task_id, self.attempts, exc
                )
                last_error = exc
            else:
                last_task = task
                await self._notify(task)
                if task.is_done:
                    logger.info("Task %s finished with status %s", self.task_id, task.status)
                    return task

            if self._budget_spent(started):
                raise PollTimeoutError(self.task_id, self.attempts, last_task) from last_error

            await self._sleep(self.interval)

    def _budget_spent(self, started: float) -> bool:
        if self.max_attempts is not None and self.attempts >= self.max_attempts:
            return True
        if self.max_wait is not None:
            elapsed = self._clock() - started
            return elapsed + self.interval >= self.max_wait
        return False

    async def _notify(self, task: Task) -> None:
        if self.callback is None:
            return
        result = self.callback(task)
        if inspect.isawaitable(result):
            await result
