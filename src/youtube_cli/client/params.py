"""Query parameter merging and request URL construction."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Union

import httpx

ParamValue = Union[str, int, float, None]
Params = Mapping[str, ParamValue]


def merge_params(*layers: Params | None) -> dict[str, ParamValue]:
    """Shallow-merge parameter mappings into a new dict.

    Later layers win on key collision; a key keeps the position of its first
    appearance. ``None`` layers are skipped and no input is modified.
    """
    merged: dict[str, ParamValue] = {}
    for layer in layers:
        if layer:
            merged.update(layer)
    return merged


def _encode(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def build_url(base_url: str, endpoint: str, params: Params) -> str:
    """Build ``<base_url>/<endpoint>?<query>`` with every value URL-encoded.

    ``None`` values are sent as empty values (``pageToken=``).
    """
    query = [(key, _encode(value)) for key, value in params.items()]
    url = httpx.URL(f"{base_url.rstrip('/')}/{endpoint.lstrip('/')}", params=query)
    return str(url)
