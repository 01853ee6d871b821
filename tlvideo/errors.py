from __future__ import annotations

from typing import Any


class TLVideoError(Exception):
    """Base class for every error raised by this library."""


class APIConnectionError(TLVideoError):
    """The request never produced an HTTP response (DNS, connect, read timeout)."""

    def __init__(self, message: str, *, method: str | None = None, path: str | None = None) -> None:
        super().__init__(message)
        self.method = method
        self.path = path


class PollTimeoutError(TLVideoError):
    """A task did not reach a terminal status within the polling budget."""

    def __init__(self, task_id: str, attempts: int, task: Any = None) -> None:
        super().__init__(f"Task {task_id} not done after {attempts} attempt(s)")
        self.task_id = task_id
        self.attempts = attempts
        self.task = task


class APIStatusError(TLVideoError):
    """Non-2xx response. Also used directly for statuses with no dedicated class."""

    def __init__(self, status_code: int, body: Any = None) -> None:
        self.status_code = status_code
        self.body = body
        self.code: str | None = None
        self.message: str | None = None
        if isinstance(body, dict):
            self.code = body.get("code")
            self.message = body.get("message")
        super().__init__(self._describe())

    def _describe(self) -> str:
        detail = self.message or (self.body if isinstance(self.body, str) else None)
        parts = [str(self.status_code)]
        if self.code:
            parts.append(self.code)
        if detail:
            parts.append(detail)
        return " ".join(parts)


class BadRequestError(APIStatusError):
    pass


class AuthenticationError(APIStatusError):
    pass


class PermissionDeniedError(APIStatusError):
    pass


class NotFoundError(APIStatusError):
    pass


class ConflictError(APIStatusError):
    pass


class UnprocessableEntityError(APIStatusError):
    pass


class RateLimitError(APIStatusError):
    pass


class InternalServerError(APIStatusError):
    pass


class InvalidResponseError(APIStatusError):
    """A 2xx response whose body does not have the expected shape."""


_STATUS_ERRORS: dict[int, type[APIStatusError]] = {
    400: BadRequestError,
    401: AuthenticationError,
    403: PermissionDeniedError,
    404: NotFoundError,
    409: ConflictError,
    422: UnprocessableEntityError,
    429: RateLimitError,
}


def map_http_error(status_code: int, body: Any = None) -> APIStatusError:
    if 500 <= status_code <= 599:
        return InternalServerError(status_code, body)
    error_cls = _STATUS_ERRORS.get(status_code, APIStatusError)
    return error_cls(status_code, body)


def is_transient(exc: BaseException) -> bool:
    return isinstance(exc, (RateLimitError, InternalServerError, APIConnectionError))
