from __future__ import annotations

import logging
from typing import Any, Mapping

from tlvideo.config import Settings


def configure_logging(level: str | None = None) -> None:
    """Set up root logging for an application using the client.

    Without ``level`` the ``TLVIDEO_LOG_LEVEL`` setting is used.
    """
    if level is None:
        level = Settings().log_level
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s - %(message)s",
    )


def drop_none(values: Mapping[str, Any]) -> dict[str, Any]:
    return {key: value for key, value in values.items() if value is not None}


def require(value: Any, name: str) -> None:
    if value is None or (isinstance(value, str) and not value.strip()):
        raise ValueError(f"{name} is required")
