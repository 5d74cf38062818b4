"""Response envelope models for the YouTube Data API."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError


class PageInfo(BaseModel):
    """Result counts reported alongside a collection."""

    model_config = ConfigDict(populate_by_name=True)

    total_results: int | None = Field(default=None, alias="totalResults")
    results_per_page: int | None = Field(default=None, alias="resultsPerPage")


class CollectionEnvelope(BaseModel):
    """A list response: ``{"kind", "items", "nextPageToken"?, "pageInfo"?}``.

    Single-item lookups arrive in the same shape; the resource is the first
    entry of ``items``.
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    kind: str | None = None
    etag: str | None = None
    items: list[dict[str, Any]] = Field(default_factory=list)
    next_page_token: str | None = Field(default=None, alias="nextPageToken")
    page_info: PageInfo | None = Field(default=None, alias="pageInfo")

    @property
    def first(self) -> dict[str, Any] | None:
        return self.items[0] if self.items else None


class ErrorDetail(BaseModel):
    """One entry of an error payload's ``errors`` list."""

    model_config = ConfigDict(extra="allow")

    domain: str | None = None
    reason: str | None = None
    message: str | None = None


class ErrorPayload(BaseModel):
    """The ``error`` object of a failed response."""

    model_config = ConfigDict(extra="allow")

    code: int | None = None
    message: str | None = None
    errors: list[ErrorDetail] = Field(default_factory=list)

    @property
    def reasons(self) -> list[str]:
        return [e.reason for e in self.errors if e.reason]


class ErrorEnvelope(BaseModel):
    """A failure response: ``{"error": {...}}``."""

    error: Any = None

    @property
    def payload(self) -> ErrorPayload | None:
        if not isinstance(self.error, dict):
            return None
        try:
            return ErrorPayload.model_validate(self.error)
        except ValidationError:
            return None
