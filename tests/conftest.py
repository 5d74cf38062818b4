"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable

import httpx
import pytest

from youtube_cli.config.manager import ConfigManager
from youtube_cli.config.models import Profile


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Keep a developer's real key, profile and config file out of the tests."""
    monkeypatch.setattr("youtube_cli.config.manager.CONFIG_FILE", tmp_path / "user-config.toml")
    monkeypatch.delenv("YOUTUBE_API_KEY", raising=False)
    monkeypatch.delenv("YOUTUBE_PROFILE", raising=False)


@pytest.fixture
def tmp_config(tmp_path: Path) -> Path:
    """Return a temporary config file path."""
    return tmp_path / "config.toml"


@pytest.fixture
def config_manager(tmp_config: Path) -> ConfigManager:
    """Return a ConfigManager pointed at a temp config file."""
    return ConfigManager(config_path=tmp_config)


@pytest.fixture
def sample_profile() -> Profile:
    """Return a sample API profile for testing."""
    return Profile(name="test", api_key="testkey")


@pytest.fixture
def mock_video() -> dict:
    """Sample video resource (videos.list item)."""
    return {
        "kind": "youtube#video",
        "etag": "abc",
        "id": "dQw4w9WgXcQ",
        "snippet": {
            "publishedAt": "2009-10-25T06:57:33Z",
            "channelId": "UCuAXFkgsw1L7xaCfnd5JJOw",
            "title": "Never Gonna Give You Up",
            "description": "The official video",
            "channelTitle": "Rick Astley",
        },
        "contentDetails": {"duration": "PT3M33S"},
    }


def _paged_source(
    total: int, kind: str = "youtube#playlistItemListResponse",
) -> Callable[[httpx.Request], httpx.Response]:
    items: list[dict[str, Any]] = [
        {"kind": "youtube#playlistItem", "id": f"item-{i}"} for i in range(total)
    ]

    def handler(request: httpx.Request) -> httpx.Response:
        params = request.url.params
        start = int(params.get("pageToken") or 0)
        size = int(params["maxResults"])
        body: dict[str, Any] = {"kind": kind, "items": items[start:start + size]}
        if start + size < total:
            body["nextPageToken"] = str(start + size)
        return httpx.Response(200, json=body)

    return handler


@pytest.fixture
def paged_source() -> Callable[..., Callable[[httpx.Request], httpx.Response]]:
    """Factory for a fake list endpoint serving ``total`` items.

    Page tokens are plain offsets and ``nextPageToken`` is only sent while
    items remain.
    """
    return _paged_source
