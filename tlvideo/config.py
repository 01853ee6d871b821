from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict

from tlvideo.constants import DEFAULT_BASE_URL, DEFAULT_POLL_INTERVAL, DEFAULT_TIMEOUT


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="TLVIDEO_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    api_key: str | None = None
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    poll_interval: float = DEFAULT_POLL_INTERVAL
    # Read by tlvideo.utils.configure_logging when no level is passed.
    log_level: str = "INFO"
