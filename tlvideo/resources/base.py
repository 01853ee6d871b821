from __future__ import annotations

import logging
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from tlvideo.errors import InvalidResponseError, map_http_error
from tlvideo.services.transport import APIResponse, HTTPTransport

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class Resource:
    def __init__(self, transport: HTTPTransport) -> None:
        self._transport = transport

    async def _send(self, method: str, path: str, **kwargs: Any) -> APIResponse:
        response = await self._transport.request(method, path, **kwargs)
        if not response.is_success:
            error = map_http_error(response.status_code, response.body)
            logger.debug("%s %s raised %s", method, path, type(error).__name__)
            raise error
        return response

    async def _request(self, method: str, path: str, **kwargs: Any) -> Any:
        response = await self._send(method, path, **kwargs)
        return response.body

    async def _request_model(self, model: type[ModelT], method: str, path: str, **kwargs: Any) -> ModelT:
        response = await self._send(method, path, **kwargs)
        return parse_model(model, response.body, response.status_code)

    async def _request_page(
        self, model: type[ModelT], method: str, path: str, **kwargs: Any
    ) -> list[ModelT]:
        response = await self._send(method, path, **kwargs)
        return [parse_model(model, item, response.status_code) for item in page_data(response.body)]

    async def _request_id(self, method: str, path: str, **kwargs: Any) -> str:
        response = await self._send(method, path, **kwargs)
        body = response.body
        if not isinstance(body, dict) or not isinstance(body.get("_id"), str):
            raise InvalidResponseError(response.status_code, body)
        return body["_id"]


def parse_model(model: type[ModelT], payload: Any, status_code: int) -> ModelT:
    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        logger.warning("Unexpected %s payload: %s", model.__name__, exc)
        raise InvalidResponseError(status_code, payload) from exc


def page_data(body: Any) -> list[Any]:
    if isinstance(body, dict):
        return body.get("data") or []
    return []
