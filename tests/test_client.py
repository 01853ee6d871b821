import logging

import httpx
import pytest

from tlvideo import TLVideo
from tlvideo.config import Settings
from tlvideo.constants import DEFAULT_BASE_URL
from tlvideo.utils import configure_logging, drop_none


def test_api_key_from_environment(monkeypatch):
    monkeypatch.setenv("TLVIDEO_API_KEY", "tlk_env")
    monkeypatch.setenv("TLVIDEO_TIMEOUT", "12.5")

    settings = Settings()

    assert settings.api_key == "tlk_env"
    assert settings.timeout == 12.5
    assert settings.base_url == DEFAULT_BASE_URL


def test_missing_api_key(monkeypatch):
    monkeypatch.delenv("TLVIDEO_API_KEY", raising=False)

    with pytest.raises(ValueError):
        TLVideo(settings=Settings(_env_file=None))


@pytest.mark.asyncio
async def test_settings_supply_defaults():
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(200, json={"data": []})

    settings = Settings(_env_file=None, api_key="tlk_settings", base_url="https://api.test/v9/")
    async with TLVideo(settings=settings, http_client=httpx.AsyncClient(transport=httpx.MockTransport(handler))) as client:
        assert await client.indexes.list() == []

    assert str(seen[0].url) == "https://api.test/v9/indexes"
    assert seen[0].headers["x-api-key"] == "tlk_settings"


@pytest.mark.asyncio
async def test_explicit_arguments_override_settings():
    seen = []

    def handler(request):
        seen.append(request)
        return httpx.Response(200, json={"data": []})

    settings = Settings(_env_file=None, api_key="tlk_settings")
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    client = TLVideo("tlk_explicit", base_url="https://other.test/v1.2", settings=settings, http_client=http_client)

    await client.engines.list()
    await client.aclose()

    assert seen[0].url.host == "other.test"
    assert seen[0].headers["x-api-key"] == "tlk_explicit"
    assert not http_client.is_closed


def test_configure_logging(monkeypatch):
    calls = {}
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.update(kwargs))

    configure_logging("debug")

    assert calls["level"] == "DEBUG"
    assert "%(name)s" in calls["format"]


def test_drop_none():
    assert drop_none({"a": 1, "b": None, "c": 0}) == {"a": 1, "c": 0}


def test_configure_logging_defaults_to_setting(monkeypatch):
    calls = {}
    monkeypatch.setenv("TLVIDEO_LOG_LEVEL", "warning")
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.update(kwargs))

    configure_logging()

    assert calls["level"] == "WARNING"
