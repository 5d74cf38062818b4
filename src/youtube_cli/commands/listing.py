"""Collection commands: playlist-items, search, subscriptions, paginate.

Each command walks the endpoint's pages until ``--count`` items have been
collected or the API runs out of pages.
"""

from __future__ import annotations

from typing import Annotated, Any

import typer

from youtube_cli.client.errors import error_handler
from youtube_cli.client.youtube import parse_id
from youtube_cli.commands._common import (
    CountOpt,
    FormatOpt,
    KeyOpt,
    ParamOpt,
    ProfileOpt,
    item_row,
    parse_params,
    run_with_client,
)
from youtube_cli.output.formatter import output

app = typer.Typer()

_COLUMNS = ["ID", "Kind", "Title"]


def _output_items(items: list[Any], fmt: str, title: str) -> None:
    rows = [item_row(item) for item in items]
    output(items, fmt, columns=_COLUMNS, rows=rows, title=f"{title} ({len(items)})")


@app.command("playlist-items")
@error_handler
def playlist_items(
    playlist_id: Annotated[str, typer.Argument(help="Playlist ID or URL")],
    count: CountOpt = None,
    params: ParamOpt = None,
    profile: ProfileOpt = None,
    key: KeyOpt = None,
    fmt: FormatOpt = "table",
) -> None:
    """List the videos of a playlist."""
    playlist_id = parse_id(playlist_id, "playlist")
    extra = parse_params(params)
    items = run_with_client(
        profile, key, lambda client: client.get_playlist_items(playlist_id, count, extra),
    )
    _output_items(items, fmt, f"Playlist {playlist_id}")


@app.command()
@error_handler
def search(
    query: Annotated[str, typer.Argument(help="Search terms")],
    type_filter: Annotated[
        str | None,
        typer.Option("--type", "-t", help="Restrict to video, playlist or channel"),
    ] = None,
    count: CountOpt = 10,
    params: ParamOpt = None,
    profile: ProfileOpt = None,
    key: KeyOpt = None,
    fmt: FormatOpt = "table",
) -> None:
    """Search videos, playlists and channels."""
    extra = parse_params(params)
    items = run_with_client(
        profile, key, lambda client: client.search(query, count, type_filter, extra),
    )
    _output_items(items, fmt, f"Search: {query}")


@app.command()
@error_handler
def subscriptions(
    channel_id: Annotated[str, typer.Argument(help="Channel ID or URL")],
    count: CountOpt = None,
    params: ParamOpt = None,
    profile: ProfileOpt = None,
    key: KeyOpt = None,
    fmt: FormatOpt = "table",
) -> None:
    """List a channel's public subscriptions."""
    channel_id = parse_id(channel_id, "channel")
    extra = parse_params(params)
    items = run_with_client(
        profile, key, lambda client: client.get_subscriptions(channel_id, count, extra),
    )
    _output_items(items, fmt, f"Subscriptions of {channel_id}")


@app.command()
@error_handler
def paginate(
    endpoint: Annotated[str, typer.Argument(help="Endpoint path, e.g. playlistItems")],
    count: CountOpt = None,
    params: ParamOpt = None,
    profile: ProfileOpt = None,
    key: KeyOpt = None,
    fmt: FormatOpt = "json",
) -> None:
    """Collect items from any list endpoint. Pass filters with --param."""
    extra = parse_params(params)
    items = run_with_client(
        profile, key, lambda client: client.get_paginated(endpoint, count, extra),
    )
    _output_items(items, fmt, endpoint)
