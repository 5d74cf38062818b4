"""Shared helpers for CLI commands: client factory, options, async runner."""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from typing import Annotated, Any, TypeVar

import typer

from youtube_cli.client.youtube import YouTubeClient
from youtube_cli.config.manager import ConfigManager

T = TypeVar("T")

# Shared Typer option type aliases
ProfileOpt = Annotated[
    str | None,
    typer.Option("--profile", "-p", help="Config profile"),
]
KeyOpt = Annotated[
    str | None,
    typer.Option("--key", help="API key override"),
]
FormatOpt = Annotated[
    str,
    typer.Option("--format", "-f", help="Output format"),
]
CountOpt = Annotated[
    int | None,
    typer.Option("--count", "-n", help="Max items to return (default: all)"),
]
PartOpt = Annotated[
    str | None,
    typer.Option("--part", help="Override the requested part set"),
]
ParamOpt = Annotated[
    list[str] | None,
    typer.Option("--param", "-P", help="Extra query parameter as key=value"),
]


def make_client(profile: str | None, key: str | None) -> YouTubeClient:
    """Create a YouTubeClient from CLI options, env vars, or config profile."""
    mgr = ConfigManager()
    return YouTubeClient(mgr.resolve_profile(profile_name=profile, api_key=key))


def run(client: YouTubeClient, call: Callable[[YouTubeClient], Awaitable[T]]) -> T:
    """Run ``call`` on a new event loop, closing ``client`` afterwards."""

    async def _run() -> T:
        async with client:
            return await call(client)

    return asyncio.run(_run())


def run_with_client(
    profile: str | None,
    key: str | None,
    call: Callable[[YouTubeClient], Awaitable[T]],
) -> T:
    return run(make_client(profile, key), call)


def parse_params(pairs: list[str] | None) -> dict[str, str]:
    """Turn ``key=value`` strings into a dict; later pairs win."""
    params: dict[str, str] = {}
    for pair in pairs or []:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            raise typer.BadParameter(f"Expected key=value, got '{pair}'", param_hint="--param")
        params[key] = value
    return params


def item_row(item: dict[str, Any]) -> list[Any]:
    """Table row (ID, Kind, Title) for any resource or search result."""
    raw_id = item.get("id")
    if isinstance(raw_id, dict):
        resource_id = raw_id.get("videoId") or raw_id.get("playlistId") or raw_id.get("channelId")
    else:
        resource_id = raw_id
    snippet = item.get("snippet") or {}
    resource = snippet.get("resourceId") or {}
    # playlistItems and subscriptions point at the underlying resource
    resource_id = resource.get("videoId") or resource.get("channelId") or resource_id
    return [resource_id or "", item.get("kind", ""), snippet.get("title", "")]
