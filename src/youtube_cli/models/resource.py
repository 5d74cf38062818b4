"""Resource descriptors: endpoint path and required part set per resource type."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from youtube_cli.client.errors import UnknownResourceTypeError


class ResourceDescriptor(BaseModel):
    """Static description of one API resource type."""

    model_config = ConfigDict(frozen=True)

    name: str
    endpoint: str
    part: str | tuple[str, ...]

    @property
    def part_param(self) -> str:
        """The ``part`` value as sent on the wire."""
        if isinstance(self.part, str):
            return self.part
        return ",".join(self.part)


RESOURCES: dict[str, ResourceDescriptor] = {
    d.name: d
    for d in (
        ResourceDescriptor(name="Videos", endpoint="videos", part=("snippet", "contentDetails")),
        ResourceDescriptor(name="Playlists", endpoint="playlists", part="snippet"),
        ResourceDescriptor(name="PlaylistItems", endpoint="playlistItems", part=("snippet", "status")),
        ResourceDescriptor(name="Channels", endpoint="channels", part="snippet"),
        ResourceDescriptor(name="Search", endpoint="search", part="snippet"),
        ResourceDescriptor(name="Subscriptions", endpoint="subscriptions", part="snippet"),
    )
}


def get_descriptor(name: str) -> ResourceDescriptor:
    try:
        return RESOURCES[name]
    except KeyError:
        raise UnknownResourceTypeError(name) from None
