"""Async HTTP client for the YouTube Data API."""

from __future__ import annotations

import json
import re
from typing import Any

import httpx
from pydantic import ValidationError

from youtube_cli.client.errors import (
    APIError,
    ConfigurationError,
    InvalidCountError,
    RequestConnectionError,
    ResourceNotFoundError,
    ResponseParseError,
)
from youtube_cli.client.params import Params, build_url, merge_params
from youtube_cli.config.constants import MAX_PAGE_SIZE
from youtube_cli.config.models import Profile
from youtube_cli.models.envelope import CollectionEnvelope, ErrorEnvelope
from youtube_cli.models.resource import RESOURCES, get_descriptor

_ID_PATTERNS: dict[str, tuple[re.Pattern[str], ...]] = {
    "video": (
        re.compile(r"[?&]v=([\w-]+)"),
        re.compile(r"youtu\.be/([\w-]+)"),
        re.compile(r"/shorts/([\w-]+)"),
    ),
    "playlist": (re.compile(r"[?&]list=([\w-]+)"),),
    "channel": (re.compile(r"/channel/([\w-]+)"),),
}


def parse_url(value: str) -> dict[str, str]:
    """Map each resource kind found in a YouTube URL to its ID.

    ``watch?v=X&list=PL`` yields both a ``video`` and a ``playlist`` entry.
    """
    found: dict[str, str] = {}
    for kind, patterns in _ID_PATTERNS.items():
        for pattern in patterns:
            match = pattern.search(value)
            if match:
                found[kind] = match.group(1)
                break
    return found


def parse_id(value: str, kind: str | None = None) -> str:
    """Extract the ``kind`` ID (video, playlist or channel) from a YouTube URL.

    Without ``kind`` the first of video, playlist, channel present is used.
    Input that carries no ID of the wanted kind is returned unchanged.
    """
    found = parse_url(value)
    if kind is not None:
        return found.get(kind, value)
    return next(iter(found.values()), value)


def _collection(url: str, body: Any) -> CollectionEnvelope:
    """Validate a successful list response; a malformed one is a parse error."""
    try:
        return CollectionEnvelope.model_validate(body)
    except ValidationError as exc:
        raise ResponseParseError(url, body) from exc


class YouTubeClient:
    """Asynchronous client for the YouTube Data API v3.

    Every public coroutine issues its own request(s) and keeps no state
    between calls, so one client can be shared by concurrent tasks.
    """

    def __init__(self, profile: Profile, *, transport: httpx.AsyncBaseTransport | None = None) -> None:
        if not profile.key_configured:
            raise ConfigurationError(f"Profile '{profile.name}' has no API key.")
        self.profile = profile
        self._client = httpx.AsyncClient(
            timeout=profile.timeout,
            transport=transport,
            headers={"Accept": "application/json"},
        )

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> YouTubeClient:
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()

    def make_url(self, endpoint: str, params: Params | None = None) -> str:
        """Full request URL; the API key comes first and may be shadowed by ``params``."""
        return build_url(
            self.profile.base_url,
            endpoint,
            merge_params({"key": self.profile.api_key}, params),
        )

    async def make(self, endpoint: str, params: Params | None = None) -> Any:
        """GET ``endpoint`` and return the parsed JSON body.

        Raises APIError for a non-2xx JSON response, ResponseParseError when
        the body is not JSON, and RequestConnectionError when no response
        arrives. Never retries.
        """
        url = self.make_url(endpoint, params)
        try:
            response = await self._client.get(url)
        except httpx.TransportError as exc:
            raise RequestConnectionError(url, str(exc) or type(exc).__name__) from exc
        try:
            body = response.json()
        except (json.JSONDecodeError, UnicodeDecodeError):
            raise ResponseParseError(url, response.text) from None
        if response.is_success:
            return body
        if isinstance(body, dict):
            envelope = ErrorEnvelope.model_validate(body)
            raise APIError(url, envelope.error, payload=envelope.payload)
        raise APIError(url, body)

    async def get_resource(self, type_name: str, params: Params | None = None) -> dict[str, Any]:
        """Fetch the first item of a resource lookup.

        The type's required ``part`` is sent unless ``params`` overrides it.
        """
        descriptor = get_descriptor(type_name)
        query = merge_params({"part": descriptor.part_param}, params)
        url = self.make_url(descriptor.endpoint, query)
        envelope = _collection(url, await self.make(descriptor.endpoint, query))
        if envelope.first is not None:
            return envelope.first
        raise ResourceNotFoundError(
            url,
            f"resource {envelope.kind} not found",
        )

    async def get_resource_by_id(
        self, type_name: str, resource_id: str, params: Params | None = None,
    ) -> dict[str, Any]:
        return await self.get_resource(type_name, merge_params(params, {"id": resource_id}))

    async def get_video(self, video_id: str, options: Params | None = None) -> dict[str, Any]:
        return await self.get_resource_by_id("Videos", video_id, options)

    async def get_playlist(self, playlist_id: str, options: Params | None = None) -> dict[str, Any]:
        return await self.get_resource_by_id("Playlists", playlist_id, options)

    async def get_channel(self, channel_id: str, options: Params | None = None) -> dict[str, Any]:
        return await self.get_resource_by_id("Channels", channel_id, options)

    async def get_paginated(
        self,
        endpoint: str,
        count: int | None = None,
        options: Params | None = None,
        fetched: list[Any] | None = None,
        page_token: str | None = None,
    ) -> list[Any]:
        """Collect up to ``count`` items (all of them when ``None``) from a list endpoint.

        Pages of at most MAX_PAGE_SIZE are requested one after another. The
        walk stops when the server sends no ``nextPageToken`` or when the
        page just fetched covered everything still wanted. Items in
        ``fetched`` are kept at the front of the result.
        """
        if count is not None and count < 1:
            raise InvalidCountError(count)

        results = list(fetched or [])
        while True:
            limit = MAX_PAGE_SIZE if count is None else min(MAX_PAGE_SIZE, count)
            query = merge_params(options, {"pageToken": page_token, "maxResults": limit})
            body = await self.make(endpoint, query)
            envelope = _collection(self.make_url(endpoint, query), body)
            results.extend(envelope.items)
            if not envelope.next_page_token or limit == count:
                return results
            if count is not None:
                count -= limit
            page_token = envelope.next_page_token

    async def get_playlist_items(
        self, playlist_id: str, count: int | None = None, options: Params | None = None,
    ) -> list[Any]:
        descriptor = RESOURCES["PlaylistItems"]
        query = merge_params(
            {"part": descriptor.part_param}, options, {"playlistId": playlist_id},
        )
        return await self.get_paginated(descriptor.endpoint, count, query)

    async def search(
        self,
        query: str,
        count: int | None = None,
        type: str | None = None,
        options: Params | None = None,
    ) -> list[Any]:
        descriptor = RESOURCES["Search"]
        params = merge_params({"part": descriptor.part_param}, options, {"q": query})
        if type:
            params["type"] = type
        return await self.get_paginated(descriptor.endpoint, count, params)

    async def get_subscriptions(
        self, channel_id: str, count: int | None = None, options: Params | None = None,
    ) -> list[Any]:
        descriptor = RESOURCES["Subscriptions"]
        query = merge_params(
            {"part": descriptor.part_param}, options, {"channelId": channel_id},
        )
        return await self.get_paginated(descriptor.endpoint, count, query)
