"""Single-resource commands: video, playlist, channel, get."""

from __future__ import annotations

from typing import Annotated, Any

import typer

from youtube_cli.client.errors import error_handler
from youtube_cli.client.youtube import parse_id
from youtube_cli.commands._common import (
    FormatOpt,
    KeyOpt,
    ParamOpt,
    PartOpt,
    ProfileOpt,
    parse_params,
    run_with_client,
)
from youtube_cli.models.resource import RESOURCES
from youtube_cli.output.formatter import output

app = typer.Typer()

_URL_KINDS = {"Videos": "video", "Playlists": "playlist", "Channels": "channel"}


def _summary(item: dict[str, Any]) -> dict[str, Any]:
    """Flatten the commonly useful fields of a resource for table display."""
    snippet = item.get("snippet") or {}
    summary: dict[str, Any] = {
        "id": item.get("id"),
        "kind": item.get("kind"),
        "title": snippet.get("title"),
        "channel": snippet.get("channelTitle"),
        "published": snippet.get("publishedAt"),
    }
    details = item.get("contentDetails") or {}
    if "duration" in details:
        summary["duration"] = details["duration"]
    if "itemCount" in details:
        summary["items"] = details["itemCount"]
    summary["description"] = snippet.get("description")
    return {k: v for k, v in summary.items() if v is not None}


def _show(
    type_name: str,
    resource_id: str,
    part: str | None,
    params: list[str] | None,
    profile: str | None,
    key: str | None,
    fmt: str,
) -> None:
    resource_id = parse_id(resource_id, _URL_KINDS.get(type_name))
    extra = parse_params(params)
    if part:
        extra["part"] = part
    item = run_with_client(
        profile,
        key,
        lambda client: client.get_resource_by_id(type_name, resource_id, extra),
    )
    data = item if fmt != "table" else _summary(item)
    output(data, fmt, title=f"{type_name}: {resource_id}")


@app.command()
@error_handler
def video(
    video_id: Annotated[str, typer.Argument(help="Video ID or URL")],
    part: PartOpt = None,
    params: ParamOpt = None,
    profile: ProfileOpt = None,
    key: KeyOpt = None,
    fmt: FormatOpt = "table",
) -> None:
    """Show a video."""
    _show("Videos", video_id, part, params, profile, key, fmt)


@app.command()
@error_handler
def playlist(
    playlist_id: Annotated[str, typer.Argument(help="Playlist ID or URL")],
    part: PartOpt = None,
    params: ParamOpt = None,
    profile: ProfileOpt = None,
    key: KeyOpt = None,
    fmt: FormatOpt = "table",
) -> None:
    """Show a playlist."""
    _show("Playlists", playlist_id, part, params, profile, key, fmt)


@app.command()
@error_handler
def channel(
    channel_id: Annotated[str, typer.Argument(help="Channel ID or URL")],
    part: PartOpt = None,
    params: ParamOpt = None,
    profile: ProfileOpt = None,
    key: KeyOpt = None,
    fmt: FormatOpt = "table",
) -> None:
    """Show a channel."""
    _show("Channels", channel_id, part, params, profile, key, fmt)


@app.command()
@error_handler
def get(
    type_name: Annotated[
        str, typer.Argument(help=f"Resource type ({', '.join(RESOURCES)})"),
    ],
    resource_id: Annotated[str, typer.Argument(help="Resource ID")],
    part: PartOpt = None,
    params: ParamOpt = None,
    profile: ProfileOpt = None,
    key: KeyOpt = None,
    fmt: FormatOpt = "json",
) -> None:
    """Fetch any registered resource type by ID."""
    _show(type_name, resource_id, part, params, profile, key, fmt)
