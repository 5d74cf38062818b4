"""Pydantic data models for the YouTube Data API."""

from youtube_cli.models.envelope import (
    CollectionEnvelope,
    ErrorDetail,
    ErrorEnvelope,
    ErrorPayload,
    PageInfo,
)
from youtube_cli.models.resource import RESOURCES, ResourceDescriptor, get_descriptor

__all__ = [
    "RESOURCES",
    "CollectionEnvelope",
    "ErrorDetail",
    "ErrorEnvelope",
    "ErrorPayload",
    "PageInfo",
    "ResourceDescriptor",
    "get_descriptor",
]
