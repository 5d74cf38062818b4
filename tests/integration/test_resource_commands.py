"""Integration tests for video, playlist, channel and get commands."""

from __future__ import annotations

import json

import httpx
import respx
from typer.testing import CliRunner

from youtube_cli.app import app

runner = CliRunner()
BASE = "https://www.googleapis.com/youtube/v3"
KEY = ["--key", "testkey"]


def _list(kind: str, *items: dict) -> httpx.Response:
    return httpx.Response(200, json={"kind": kind, "items": list(items)})


class TestVideoCommand:
    @respx.mock
    def test_show_video_table(self, mock_video):
        respx.get(f"{BASE}/videos").mock(return_value=_list("youtube#videoListResponse", mock_video))
        result = runner.invoke(app, ["video", "dQw4w9WgXcQ", *KEY])
        assert result.exit_code == 0
        assert "Never Gonna Give You Up" in result.output
        assert "PT3M33S" in result.output

    @respx.mock
    def test_video_from_url(self, mock_video):
        route = respx.get(f"{BASE}/videos").mock(return_value=_list("youtube#videoListResponse", mock_video))
        result = runner.invoke(app, ["video", "https://youtu.be/dQw4w9WgXcQ", *KEY])
        assert result.exit_code == 0
        assert route.calls[0].request.url.params["id"] == "dQw4w9WgXcQ"

    @respx.mock
    def test_video_json(self, mock_video):
        respx.get(f"{BASE}/videos").mock(return_value=_list("youtube#videoListResponse", mock_video))
        result = runner.invoke(app, ["video", "dQw4w9WgXcQ", "--format", "json", *KEY])
        assert result.exit_code == 0
        assert json.loads(result.output)["id"] == "dQw4w9WgXcQ"

    @respx.mock
    def test_part_and_params(self, mock_video):
        route = respx.get(f"{BASE}/videos").mock(return_value=_list("youtube#videoListResponse", mock_video))
        result = runner.invoke(app, [
            "video", "dQw4w9WgXcQ", "--part", "statistics", "--param", "hl=de", *KEY,
        ])
        assert result.exit_code == 0
        params = route.calls[0].request.url.params
        assert params["part"] == "statistics"
        assert params["hl"] == "de"

    @respx.mock
    def test_video_not_found(self):
        respx.get(f"{BASE}/videos").mock(return_value=_list("youtube#videoListResponse"))
        result = runner.invoke(app, ["video", "missing", *KEY])
        assert result.exit_code == 4

    @respx.mock
    def test_quota_exceeded(self):
        respx.get(f"{BASE}/videos").mock(return_value=httpx.Response(403, json={
            "error": {"code": 403, "message": "quota exceeded"},
        }))
        result = runner.invoke(app, ["video", "abc", *KEY])
        assert result.exit_code == 3

    @respx.mock
    def test_connection_error(self):
        respx.get(f"{BASE}/videos").mock(side_effect=httpx.ConnectError("refused"))
        result = runner.invoke(app, ["video", "abc", *KEY])
        assert result.exit_code == 2

    @respx.mock
    def test_malformed_success_body(self):
        respx.get(f"{BASE}/videos").mock(return_value=httpx.Response(200, json=[1]))
        result = runner.invoke(app, ["video", "abc", *KEY])
        assert result.exit_code == 3
        assert "Traceback" not in result.output

    def test_no_key_configured(self):
        result = runner.invoke(app, ["video", "abc"])
        assert result.exit_code == 6

    @respx.mock
    def test_key_from_env(self, monkeypatch, mock_video):
        monkeypatch.setenv("YOUTUBE_API_KEY", "envkey")
        route = respx.get(f"{BASE}/videos").mock(return_value=_list("youtube#videoListResponse", mock_video))
        result = runner.invoke(app, ["video", "dQw4w9WgXcQ"])
        assert result.exit_code == 0
        assert route.calls[0].request.url.params["key"] == "envkey"


class TestPlaylistAndChannel:
    @respx.mock
    def test_playlist(self):
        route = respx.get(f"{BASE}/playlists").mock(return_value=_list(
            "youtube#playlistListResponse",
            {"kind": "youtube#playlist", "id": "PL1", "snippet": {"title": "My Mix"},
             "contentDetails": {"itemCount": 12}},
        ))
        result = runner.invoke(app, ["playlist", "https://www.youtube.com/playlist?list=PL1", *KEY])
        assert result.exit_code == 0
        assert "My Mix" in result.output
        assert route.calls[0].request.url.params["id"] == "PL1"

    @respx.mock
    def test_playlist_from_watch_url_uses_list_id(self):
        route = respx.get(f"{BASE}/playlists").mock(return_value=_list(
            "youtube#playlistListResponse", {"kind": "youtube#playlist", "id": "PLabc_123"},
        ))
        url = "https://www.youtube.com/watch?v=dQw4w9WgXcQ&list=PLabc_123"
        result = runner.invoke(app, ["playlist", url, *KEY])
        assert result.exit_code == 0
        assert route.calls[0].request.url.params["id"] == "PLabc_123"

    @respx.mock
    def test_video_from_watch_url_with_list(self, mock_video):
        route = respx.get(f"{BASE}/videos").mock(return_value=_list("youtube#videoListResponse", mock_video))
        url = "https://www.youtube.com/watch?list=PLabc_123&v=dQw4w9WgXcQ"
        result = runner.invoke(app, ["video", url, *KEY])
        assert result.exit_code == 0
        assert route.calls[0].request.url.params["id"] == "dQw4w9WgXcQ"

    @respx.mock
    def test_channel(self):
        respx.get(f"{BASE}/channels").mock(return_value=_list(
            "youtube#channelListResponse",
            {"kind": "youtube#channel", "id": "UC1", "snippet": {"title": "Some Channel"}},
        ))
        result = runner.invoke(app, ["channel", "UC1", *KEY])
        assert result.exit_code == 0
        assert "Some Channel" in result.output


class TestGetCommand:
    @respx.mock
    def test_get_any_type(self):
        route = respx.get(f"{BASE}/subscriptions").mock(return_value=_list(
            "youtube#subscriptionListResponse", {"kind": "youtube#subscription", "id": "sub1"},
        ))
        result = runner.invoke(app, ["get", "Subscriptions", "sub1", *KEY])
        assert result.exit_code == 0
        assert "sub1" in result.output
        assert route.calls[0].request.url.params["part"] == "snippet"

    def test_unknown_type(self):
        result = runner.invoke(app, ["get", "Comments", "c1", *KEY])
        assert result.exit_code == 7


class TestVersion:
    def test_version(self):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert "youtube-cli" in result.output
