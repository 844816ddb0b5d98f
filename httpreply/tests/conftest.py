"""Shared pytest fixtures for response tests."""

from __future__ import annotations

import pytest

from httpreply.config import get_settings
from httpreply.sinks import BufferedSink


@pytest.fixture(autouse=True)
def _clean_settings(monkeypatch: pytest.MonkeyPatch):
    """Run every test without a protocol leaking in from the environment."""

    for name in (
        "SERVER_PROTOCOL",
        "HTTPREPLY_DEFAULT_PROTOCOL",
        "HTTPREPLY_LOG_LEVEL",
        "ALLOWED_ORIGINS",
    ):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture()
def sink() -> BufferedSink:
    return BufferedSink()


@pytest.fixture()
def api_result() -> dict[str, str]:
    return {"result": "success", "message": "ok"}
